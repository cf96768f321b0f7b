import logging
from datetime import datetime

from django.db.models import Q
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, render
from django.utils import timezone
from django.views.decorators.http import require_GET

from booking.decorators import api_data_ratelimit
from booking.services import BookingService
from turf_booking.formatting import format_date, format_price

from .models import Turf

logger = logging.getLogger(__name__)


def turf_list(request):
    """All turfs, optionally narrowed by name or location"""
    query = request.GET.get('q', '').strip()
    turfs = Turf.objects.all()
    if query:
        turfs = turfs.filter(Q(name__icontains=query) | Q(location__icontains=query))

    return render(request, 'turfs/list.html', {
        'turfs': turfs,
        'query': query,
    })


def _selected_date(request):
    today = timezone.localdate()
    date_str = request.GET.get('date')
    if not date_str:
        return today
    try:
        selected = datetime.strptime(date_str, '%Y-%m-%d').date()
    except ValueError:
        return today
    return max(selected, today)


def turf_detail(request, turf_id):
    turf = get_object_or_404(Turf, id=turf_id)
    selected_date = _selected_date(request)

    return render(request, 'turfs/detail.html', {
        'turf': turf,
        'selected_date': selected_date,
        'today': timezone.localdate(),
        'slots': BookingService.get_available_slots(turf, selected_date),
    })


@require_GET
@api_data_ratelimit()
def api_available_slots(request, turf_id):
    """Slot availability for a turf on ?date=YYYY-MM-DD"""
    date_str = request.GET.get('date')
    if not date_str:
        return JsonResponse({
            'success': False,
            'message': 'Please select a date'
        }, status=400)

    try:
        booking_date = datetime.strptime(date_str, '%Y-%m-%d').date()
    except ValueError:
        return JsonResponse({
            'success': False,
            'message': 'Date must be YYYY-MM-DD'
        }, status=400)

    turf = Turf.objects.filter(id=turf_id).first()
    if not turf:
        return JsonResponse({
            'success': False,
            'message': 'Turf not found'
        }, status=404)

    if booking_date < timezone.localdate():
        return JsonResponse({
            'success': False,
            'message': 'Bookings cannot be made for past dates'
        })

    try:
        slots = BookingService.get_available_slots(turf, booking_date)
    except Exception as e:
        logger.error(f"Error in api_available_slots: {str(e)}", exc_info=True)
        return JsonResponse({
            'success': False,
            'message': 'Could not load slots'
        }, status=500)

    available_count = sum(1 for slot in slots if slot['is_available'])

    return JsonResponse({
        'success': True,
        'slots': slots,
        'turf_id': turf.id,
        'turf_name': turf.name,
        'turf_price': float(turf.price),
        'turf_price_formatted': format_price(turf.price),
        'date': date_str,
        'date_formatted': format_date(booking_date, 'short'),
        'available_count': available_count,
        'total_slots': len(slots),
    })
