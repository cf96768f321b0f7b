"""
Manager panel: turfs, bookings and users of the whole site
"""
import logging

from django.contrib import messages
from django.contrib.auth.models import User
from django.http import JsonResponse
from django.shortcuts import get_object_or_404, redirect, render
from django.views.decorators.http import require_POST

from booking.analytics import (
    compute_dashboard_stats, get_revenue_by_turf, get_status_breakdown, load_dashboard_bookings,
)
from turfs.forms import TurfForm
from turfs.models import Turf
from users.models import UserProfile
from users.utils import admin_required

from .filters import filter_bookings, filter_turfs, filter_users

logger = logging.getLogger(__name__)

TABS = ['turfs', 'bookings', 'users']


@admin_required
def dashboard(request):
    """Stat cards plus the turfs / bookings / users tabs with a shared search box"""
    tab = request.GET.get('tab', 'turfs')
    if tab not in TABS:
        tab = 'turfs'
    query = request.GET.get('q', '').strip()

    try:
        rows = load_dashboard_bookings()
        stats = compute_dashboard_stats(rows, User.objects.count())
        turfs = filter_turfs(Turf.objects.all(), query)
        profiles = filter_users(UserProfile.objects.select_related('user'), query)
        bookings = filter_bookings(rows, query)
    except Exception as e:
        logger.error(f"Error loading manager dashboard: {str(e)}", exc_info=True)
        messages.error(request, 'Failed to load dashboard data. Please try again.')
        stats = compute_dashboard_stats([], 0)
        turfs, profiles, bookings = [], [], []

    return render(request, 'manager/dashboard.html', {
        'current_page': 'dashboard',
        'tab': tab,
        'query': query,
        'stats': stats,
        'turfs': turfs,
        'profiles': profiles,
        'bookings': bookings,
    })


@admin_required
def add_turf(request):
    if request.method == 'POST':
        form = TurfForm(request.POST)
        if form.is_valid():
            turf = form.save(owner=request.user)
            logger.info(f"Turf {turf.id} '{turf.name}' added by {request.user.username}")
            messages.success(request, f"{turf.name} has been added successfully")
            return redirect('manager:dashboard')
    else:
        form = TurfForm()

    return render(request, 'manager/turf_form.html', {
        'current_page': 'turfs',
        'form': form,
        'title': 'Add New Turf',
    })


@admin_required
def edit_turf(request, turf_id):
    turf = get_object_or_404(Turf, id=turf_id)

    if request.method == 'POST':
        form = TurfForm(request.POST, instance=turf)
        if form.is_valid():
            turf = form.save()
            logger.info(f"Turf {turf.id} updated by {request.user.username}")
            messages.success(request, f"{turf.name} has been updated")
            return redirect('manager:dashboard')
    else:
        form = TurfForm(instance=turf)

    return render(request, 'manager/turf_form.html', {
        'current_page': 'turfs',
        'form': form,
        'turf': turf,
        'title': f'Edit {turf.name}',
    })


@admin_required
@require_POST
def delete_turf(request, turf_id):
    """Delete a turf; its bookings go with it"""
    turf = get_object_or_404(Turf, id=turf_id)
    name = turf.name

    try:
        turf.delete()
    except Exception as e:
        logger.error(f"Error deleting turf {turf_id}: {str(e)}", exc_info=True)
        messages.error(request, 'Failed to delete turf. Please try again.')
        return redirect('manager:dashboard')

    logger.info(f"Turf {turf_id} '{name}' deleted by {request.user.username}")
    messages.success(request, 'Turf deleted')
    return redirect('manager:dashboard')


@admin_required
def api_metrics(request):
    """API: dashboard figures and chart data"""
    try:
        stats = compute_dashboard_stats(load_dashboard_bookings(), User.objects.count())

        revenue_by_turf = [
            {
                'turf_id': item['turf__id'],
                'turf_name': item['turf__name'],
                'revenue': float(item['revenue'] or 0),
                'bookings_count': item['bookings_count'],
            }
            for item in get_revenue_by_turf()
        ]

        return JsonResponse({
            'success': True,
            'metrics': stats.as_dict(),
            'charts': {
                'revenue_by_turf': revenue_by_turf,
                'status_breakdown': get_status_breakdown(),
            }
        })
    except Exception as e:
        logger.error(f"Error in api_metrics: {str(e)}", exc_info=True)
        return JsonResponse({'success': False, 'error': str(e)}, status=500)
