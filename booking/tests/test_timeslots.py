from datetime import date, datetime

import pytest
from django.utils import timezone

from booking.timeslots import (
    TIME_SLOTS, can_cancel, derive_end_time, hours_until_start, normalize_slot, parse_start_time,
    to_24_hour,
)


def local(*args):
    return timezone.make_aware(datetime(*args))


@pytest.mark.parametrize('start, end', [
    ('09:00 AM', '10:00 AM'),
    ('11:00 AM', '12:00 PM'),
    ('12:00 PM', '01:00 PM'),
    ('12:30 PM', '01:30 PM'),
    ('12:15 AM', '01:15 AM'),
    ('08:00 PM', '09:00 PM'),
    ('1:45 PM', '02:45 PM'),
    ('11:00 PM', '12:00 AM'),
    ('11:30 PM', '12:30 AM'),
])
def test_derive_end_time(start, end):
    assert derive_end_time(start) == end


@pytest.mark.parametrize('period', ['AM', 'PM'])
@pytest.mark.parametrize('hour', range(1, 13))
def test_end_time_is_one_hour_after_start(hour, period):
    start = f"{hour:02d}:30 {period}"
    start_hour, start_minute = parse_start_time(start)
    end_hour, end_minute = parse_start_time(derive_end_time(start))

    assert end_hour == (start_hour + 1) % 24
    assert end_minute == start_minute == 30


@pytest.mark.parametrize('value', ['', None, '9 AM', '09:00', '13:00 PM', '00:30 AM', '09:00 am', '9:0 AM'])
def test_derive_end_time_rejects_malformed_input(value):
    with pytest.raises(ValueError):
        derive_end_time(value)


def test_every_offered_slot_ends_the_same_day():
    for slot in TIME_SLOTS:
        assert parse_start_time(derive_end_time(slot))[0] > parse_start_time(slot)[0]


@pytest.mark.parametrize('hour, period, expected', [
    (12, 'AM', 0),
    (12, 'PM', 12),
    (1, 'PM', 13),
    (11, 'AM', 11),
    (9, None, 9),
    (7, 'pm', 19),
])
def test_to_24_hour(hour, period, expected):
    assert to_24_hour(hour, period) == expected


def test_parse_start_time_is_lenient_with_stored_values():
    assert parse_start_time('09:00:00') == (9, 0)
    assert parse_start_time('7:30 pm') == (19, 30)
    assert parse_start_time('starts at 03:00 PM') == (15, 0)

    with pytest.raises(ValueError):
        parse_start_time('soon')


def test_hours_until_start_is_signed():
    now = local(2024, 6, 10, 12, 0)
    assert hours_until_start(date(2024, 6, 10), '03:00 PM', now=now) == 3
    assert hours_until_start(date(2024, 6, 10), '09:00 AM', now=now) == -3


def test_can_cancel_at_exactly_seven_hours():
    booking_date = date(2024, 6, 10)
    assert can_cancel('confirmed', booking_date, '03:00 PM', now=local(2024, 6, 10, 8, 0)) is True
    assert can_cancel('confirmed', booking_date, '03:00 PM', now=local(2024, 6, 10, 8, 0, 1)) is False


def test_can_cancel_six_hours_fifty_nine_minutes_before():
    assert can_cancel('confirmed', date(2024, 6, 10), '03:00 PM', now=local(2024, 6, 10, 8, 1)) is False


def test_can_cancel_across_days():
    assert can_cancel('pending', date(2024, 6, 11), '09:00 AM', now=local(2024, 6, 10, 20, 0)) is True


def test_cannot_cancel_started_or_cancelled_bookings():
    now = local(2024, 6, 10, 8, 0)
    assert can_cancel('confirmed', date(2024, 6, 9), '09:00 AM', now=now) is False
    assert can_cancel('cancelled', date(2024, 7, 1), '09:00 AM', now=now) is False


def test_can_cancel_fails_closed_on_bad_times():
    now = local(2024, 6, 10, 8, 0)
    assert can_cancel('confirmed', date(2024, 6, 20), 'soon', now=now) is False
    assert can_cancel('confirmed', None, '09:00 AM', now=now) is False


@pytest.mark.parametrize('value, expected', [
    ('1:00 PM', '01:00 PM'),
    ('01:00 PM', '01:00 PM'),
    (' 9:30 AM ', '09:30 AM'),
    ('12:00 PM', '12:00 PM'),
])
def test_normalize_slot(value, expected):
    assert normalize_slot(value) == expected


@pytest.mark.parametrize('value', ['', '13:00 PM', '1 PM', '01:00 pm'])
def test_normalize_slot_rejects_malformed_input(value):
    with pytest.raises(ValueError):
        normalize_slot(value)
