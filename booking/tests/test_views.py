from datetime import timedelta

import pytest
from django.core.cache import cache
from django.urls import reverse
from django.utils import timezone

from booking.models import Booking


@pytest.fixture
def player_client(client, player):
    client.force_login(player)
    return client


@pytest.mark.django_db
def test_create_booking_redirects_to_my_bookings(player_client, turf, future_date):
    response = player_client.post(reverse('create_booking'), {
        'turf_id': turf.id,
        'date': future_date.isoformat(),
        'start_time': '06:00 PM',
    })

    assert response.status_code == 302
    assert response.url == reverse('my_bookings')

    booking = Booking.objects.get()
    assert booking.end_time == '07:00 PM'
    assert booking.status == Booking.Status.CONFIRMED


@pytest.mark.django_db
def test_create_booking_without_slot_goes_back_to_turf(player_client, turf, future_date):
    response = player_client.post(reverse('create_booking'), {
        'turf_id': turf.id,
        'date': future_date.isoformat(),
    }, follow=True)

    assert response.redirect_chain[-1][0] == reverse('turf_detail', args=[turf.id])
    assert 'Please select a date and time slot' in [str(m) for m in response.context['messages']]
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_create_booking_requires_login(client, turf, future_date):
    response = client.post(reverse('create_booking'), {
        'turf_id': turf.id,
        'date': future_date.isoformat(),
        'start_time': '09:00 AM',
    })

    assert response.status_code == 302
    assert response.url.startswith('/users/login/')
    assert not Booking.objects.exists()


@pytest.mark.django_db
def test_my_bookings_lists_cards(player_client, make_booking, future_date):
    make_booking()
    make_booking(booking_date=future_date + timedelta(days=1))

    response = player_client.get(reverse('my_bookings'))

    assert response.status_code == 200
    cards = response.context['bookings']
    assert [c.booking_date for c in cards] == [future_date + timedelta(days=1), future_date]
    assert all(c.can_cancel for c in cards)
    assert '₹1,200' in response.content.decode()


@pytest.mark.django_db
def test_cancel_booking_returns_updated_card(player_client, make_booking):
    booking = make_booking()

    response = player_client.post(reverse('cancel_booking', args=[booking.id]))

    data = response.json()
    assert data['success'] is True
    assert data['booking']['status'] == 'cancelled'
    assert data['booking']['can_cancel'] is False
    booking.refresh_from_db()
    assert booking.is_cancelled


@pytest.mark.django_db
def test_cancel_inside_window_is_refused(player_client, make_booking):
    in_two_hours = timezone.localtime() + timedelta(hours=2)
    booking = make_booking(booking_date=in_two_hours.date(), start_time=in_two_hours.strftime('%I:00 %p'))

    response = player_client.post(reverse('cancel_booking', args=[booking.id]))

    assert response.json()['success'] is False
    booking.refresh_from_db()
    assert booking.status == Booking.Status.CONFIRMED


@pytest.mark.django_db
def test_cancel_someone_elses_booking_is_404(client, other_player, make_booking):
    booking = make_booking()
    client.force_login(other_player)

    response = client.post(reverse('cancel_booking', args=[booking.id]))

    assert response.status_code == 404
    booking.refresh_from_db()
    assert booking.status == Booking.Status.CONFIRMED


@pytest.mark.django_db
def test_cancel_requires_post(player_client, make_booking):
    booking = make_booking()
    assert player_client.get(reverse('cancel_booking', args=[booking.id])).status_code == 405


@pytest.mark.django_db
def test_booking_info(player_client, make_booking):
    booking = make_booking()

    data = player_client.get(reverse('booking_info', args=[booking.id])).json()

    assert data['success'] is True
    assert data['booking']['turf_name'] == 'Green Field Arena'
    assert data['booking']['time'] == '09:00 AM - 10:00 AM'
    assert data['booking']['price_formatted'] == '₹1,200'


@pytest.mark.django_db
def test_rate_limited_cancel_returns_429(settings, player_client, make_booking):
    settings.RATELIMIT_ENABLE = True
    cache.clear()
    booking = make_booking()

    statuses = [
        player_client.post(reverse('cancel_booking', args=[booking.id])).status_code
        for _ in range(11)
    ]

    assert statuses[-1] == 429


@pytest.mark.django_db
def test_create_booking_with_non_numeric_turf_id(player_client, future_date):
    response = player_client.post(reverse('create_booking'), {
        'turf_id': 'abc',
        'date': future_date.isoformat(),
        'start_time': '09:00 AM',
    }, follow=True)

    assert response.status_code == 200
    assert response.redirect_chain[-1][0] == reverse('turf_list')
    assert 'Please select a date and time slot' in [str(m) for m in response.context['messages']]
    assert not Booking.objects.exists()
