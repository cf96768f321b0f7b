import logging

from django.contrib import messages
from django.contrib.auth.decorators import login_required
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.utils.dateparse import parse_date
from django.views.decorators.http import require_GET, require_POST

from turf_booking.formatting import format_date, format_price
from turfs.models import Turf

from .decorators import api_data_ratelimit, api_write_ratelimit
from .models import Booking
from .services import BookingError, BookingService
from .viewmodels import apply_cancellation, build_booking_cards

logger = logging.getLogger(__name__)


@login_required
@require_POST
@api_write_ratelimit()
def create_booking(request):
    """Book the slot picked on the turf page, then go to My Bookings"""
    turf_id = request.POST.get('turf_id')
    date_str = request.POST.get('date', '')
    start_time = request.POST.get('start_time', '').strip()

    turf = get_object_or_404(Turf, id=turf_id) if turf_id and turf_id.isdigit() else None
    back = redirect('turf_detail', turf_id=turf.id) if turf else redirect('turf_list')

    try:
        booking_date = parse_date(date_str) if date_str else None
        booking = BookingService.create_booking(turf, request.user, booking_date, start_time)
    except BookingError as e:
        messages.error(request, str(e))
        return back
    except ValueError:
        messages.error(request, 'Please select a valid date')
        return back
    except Exception as e:
        logger.error(
            f"Error creating booking for user {request.user.username}: {str(e)}",
            exc_info=True,
        )
        messages.error(request, 'Could not create the booking. Please try again.')
        return back

    messages.success(
        request,
        f"Booking confirmed: {turf.name} on {format_date(booking.booking_date, 'short')}, "
        f"{booking.start_time} - {booking.end_time}"
    )
    return redirect('my_bookings')


@login_required
def my_bookings(request):
    """The user's bookings, newest booking date first"""
    try:
        cards = build_booking_cards(BookingService.list_user_bookings(request.user))
    except Exception as e:
        logger.error(f"Error loading bookings for user {request.user.username}: {str(e)}", exc_info=True)
        messages.error(request, 'Could not load your bookings. Please try again.')
        cards = []

    return render(request, 'booking/my_bookings.html', {
        'bookings': cards,
    })


def _card_payload(card):
    return {
        'id': card.id,
        'turf_name': card.turf_name,
        'date': card.booking_date.isoformat(),
        'date_formatted': card.formatted_date,
        'time': f"{card.start_time} - {card.end_time}",
        'price': float(card.total_price),
        'price_formatted': card.formatted_price,
        'status': card.status,
        'can_cancel': card.can_cancel,
    }


@login_required
@require_POST
@api_write_ratelimit()
def cancel_booking(request, booking_id):
    """Cancel a booking at least 7 hours before it starts"""
    cards = build_booking_cards(BookingService.list_user_bookings(request.user))
    card = next((c for c in cards if c.id == booking_id), None)

    if card is None:
        return JsonResponse({
            'success': False,
            'message': 'Booking not found'
        }, status=404)

    if not card.can_cancel:
        return JsonResponse({
            'success': False,
            'message': 'Bookings can only be cancelled at least 7 hours before the start time.'
        })

    try:
        BookingService.cancel_booking(booking_id, request.user)
    except Booking.DoesNotExist:
        return JsonResponse({
            'success': False,
            'message': 'Booking not found'
        }, status=404)
    except BookingError as e:
        return JsonResponse({
            'success': False,
            'message': str(e)
        })
    except Exception as e:
        logger.error(f"Error cancelling booking {booking_id}: {str(e)}", exc_info=True)
        return JsonResponse({
            'success': False,
            'message': 'Could not cancel the booking. Please try again.'
        }, status=500)

    cards = apply_cancellation(cards, booking_id)
    cancelled = next(c for c in cards if c.id == booking_id)

    return JsonResponse({
        'success': True,
        'message': 'Booking cancelled successfully',
        'booking_id': booking_id,
        'booking': _card_payload(cancelled),
    })


@login_required
@require_GET
@api_data_ratelimit()
def get_booking_info(request, booking_id):
    """Summary of one of the user's bookings"""
    booking = get_object_or_404(Booking.objects.select_related('turf'), id=booking_id, user=request.user)

    return JsonResponse({
        'success': True,
        'booking': {
            'id': booking.id,
            'turf_name': booking.turf.name,
            'location': booking.turf.location,
            'date': booking.booking_date.isoformat(),
            'date_formatted': format_date(booking.booking_date, 'short'),
            'time': f"{booking.start_time} - {booking.end_time}",
            'price': float(booking.total_price),
            'price_formatted': format_price(booking.total_price),
            'status': booking.status,
            'can_cancel': booking.can_cancel(),
        }
    })
