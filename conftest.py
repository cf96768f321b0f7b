from datetime import timedelta
from decimal import Decimal

import pytest
from django.contrib.auth.models import User
from django.utils import timezone

from booking.models import Booking
from turfs.models import Turf


@pytest.fixture(autouse=True)
def no_ratelimit(settings):
    settings.RATELIMIT_ENABLE = False


@pytest.fixture
def player(db):
    return User.objects.create_user(
        username='player',
        email='player@example.com',
        password='s3cret-pass',
    )


@pytest.fixture
def other_player(db):
    return User.objects.create_user(
        username='other',
        email='other@example.com',
        password='s3cret-pass',
    )


@pytest.fixture
def manager_user(db):
    user = User.objects.create_user(
        username='owner',
        email='owner@example.com',
        password='s3cret-pass',
    )
    user.profile.is_admin = True
    user.profile.save()
    return user


@pytest.fixture
def turf(db):
    return Turf.objects.create(
        name='Green Field Arena',
        location='Gachibowli, Hyderabad',
        description='5-a-side artificial grass',
        price=Decimal('1200.00'),
        capacity=10,
        features=['Floodlights', 'Parking'],
    )


@pytest.fixture
def future_date():
    return timezone.localdate() + timedelta(days=5)


@pytest.fixture
def make_booking(db, player, turf, future_date):
    def _make(**overrides):
        data = {
            'turf': turf,
            'user': player,
            'booking_date': future_date,
            'start_time': '09:00 AM',
            'end_time': '10:00 AM',
            'total_price': turf.price,
            'status': Booking.Status.CONFIRMED,
        }
        data.update(overrides)
        return Booking.objects.create(**data)
    return _make
