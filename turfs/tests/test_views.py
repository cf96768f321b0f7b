from datetime import timedelta

import pytest
from django.urls import reverse
from django.utils import timezone

from turfs.models import Turf


@pytest.mark.django_db
def test_turf_list_search(client, turf):
    Turf.objects.create(name='Striker Box Cricket', location='Kondapur, Hyderabad', price=1000)

    response = client.get(reverse('turf_list'), {'q': 'gachibowli'})

    assert response.status_code == 200
    assert list(response.context['turfs']) == [turf]


@pytest.mark.django_db
def test_turf_detail_shows_slots(client, turf, future_date):
    response = client.get(reverse('turf_detail', args=[turf.id]), {'date': future_date.isoformat()})

    assert response.status_code == 200
    assert response.context['selected_date'] == future_date
    assert len(response.context['slots']) == 12
    assert '₹1,200' in response.content.decode()


@pytest.mark.django_db
def test_turf_detail_never_selects_a_past_date(client, turf):
    past = timezone.localdate() - timedelta(days=3)

    response = client.get(reverse('turf_detail', args=[turf.id]), {'date': past.isoformat()})

    assert response.context['selected_date'] == timezone.localdate()


@pytest.mark.django_db
def test_slots_api(client, turf, future_date, make_booking):
    make_booking(start_time='07:00 PM', end_time='08:00 PM')

    data = client.get(reverse('turf_slots', args=[turf.id]), {'date': future_date.isoformat()}).json()

    assert data['success'] is True
    assert data['total_slots'] == 12
    assert data['available_count'] == 11
    assert data['turf_price_formatted'] == '₹1,200'


@pytest.mark.django_db
@pytest.mark.parametrize('params', [{}, {'date': '10/06/2024'}])
def test_slots_api_validates_date(client, turf, params):
    response = client.get(reverse('turf_slots', args=[turf.id]), params)

    assert response.status_code == 400
    assert response.json()['success'] is False


@pytest.mark.django_db
def test_slots_api_unknown_turf(client, future_date):
    response = client.get(reverse('turf_slots', args=[999]), {'date': future_date.isoformat()})

    assert response.status_code == 404
