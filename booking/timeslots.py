"""
12-hour slot arithmetic and the cancellation window.

Slot times are stored exactly as shown to players ("09:00 AM"), so every
computation goes through these helpers instead of datetime.strptime.
"""
import logging
import re
from datetime import datetime, time, timedelta

from django.utils import timezone

from .constants import MIN_CANCEL_HOURS, SLOT_DURATION_HOURS, STATUS_CANCELLED

logger = logging.getLogger(__name__)

# Lenient: minutes, optional seconds and suffix; used for stored values
TIME_PATTERN = re.compile(r'(\d+):(\d+)(?::(\d+))?\s*([AP]M)?', re.IGNORECASE)

# Strict: what the booking form is allowed to submit
SLOT_PATTERN = re.compile(r'^(\d{1,2}):(\d{2})\s([AP]M)$')

TIME_SLOTS = [
    "09:00 AM",
    "10:00 AM",
    "11:00 AM",
    "12:00 PM",
    "01:00 PM",
    "02:00 PM",
    "03:00 PM",
    "04:00 PM",
    "05:00 PM",
    "06:00 PM",
    "07:00 PM",
    "08:00 PM",
]


def to_24_hour(hour, period):
    """
    12-hour clock value -> hour in [0, 23].

    12 AM is midnight, 12 PM is noon; a missing period keeps the hour as is.
    """
    period = (period or '').upper()
    if period == 'PM' and hour != 12:
        return hour + 12
    if period == 'AM' and hour == 12:
        return 0
    return hour


def to_12_hour(hour):
    """Hour in [0, 23] -> (display hour, period)."""
    period = 'PM' if hour >= 12 else 'AM'
    display_hour = hour % 12
    if display_hour == 0:
        display_hour = 12
    return display_hour, period


def parse_start_time(value):
    """
    Parse a stored start time into (hour24, minute).

    Raises:
        ValueError: the value does not look like "H:MM[:SS] [AM|PM]"
    """
    match = TIME_PATTERN.search(value or '')
    if not match:
        raise ValueError(f"Unrecognised time: {value!r}")

    hour_str, minute_str, _seconds, period = match.groups()
    hour = to_24_hour(int(hour_str), period)
    minute = int(minute_str)

    if not (0 <= hour <= 23 and 0 <= minute <= 59):
        raise ValueError(f"Time out of range: {value!r}")

    return hour, minute


def _match_slot(start_time):
    match = SLOT_PATTERN.match((start_time or '').strip())
    if not match:
        raise ValueError(f"Start time must look like '09:00 AM', got {start_time!r}")

    hour_str, minute_str, period = match.groups()
    hour = int(hour_str)
    if not 1 <= hour <= 12:
        raise ValueError(f"Hour out of range: {start_time!r}")
    return hour, minute_str, period


def normalize_slot(start_time):
    """
    Canonical display form of a submitted start time: "1:00 PM" -> "01:00 PM".

    Raises:
        ValueError: `start_time` is not "H:MM AM" / "H:MM PM"
    """
    hour, minute_str, period = _match_slot(start_time)
    return f"{hour:02d}:{minute_str} {period}"


def derive_end_time(start_time, hours=SLOT_DURATION_HOURS):
    """
    End of a slot that starts at `start_time`, in the same display format.

    "09:00 AM" -> "10:00 AM", "12:30 PM" -> "01:30 PM", "11:00 PM" -> "12:00 AM".
    The date never rolls over: slots crossing midnight are not offered.

    Raises:
        ValueError: `start_time` is not "H:MM AM" / "H:MM PM"
    """
    hour, minute_str, period = _match_slot(start_time)

    end_hour = (to_24_hour(hour, period) + hours) % 24
    display_hour, end_period = to_12_hour(end_hour)
    return f"{display_hour:02d}:{minute_str} {end_period}"


def booking_start(booking_date, start_time, tzinfo=None):
    """
    Compose the instant a booking starts.

    Naive unless `tzinfo` is given; when it is, the wall time is interpreted
    in the current Django time zone.
    """
    hour, minute = parse_start_time(start_time)
    start = datetime.combine(booking_date, time(hour, minute))
    if tzinfo is not None:
        start = timezone.make_aware(start)
    return start


def hours_until_start(booking_date, start_time, now=None):
    """Signed hours from `now` until the booking starts (negative once started)."""
    now = now or timezone.now()
    start = booking_start(booking_date, start_time, tzinfo=now.tzinfo)
    return (start - now) / timedelta(hours=1)


def can_cancel(status, booking_date, start_time, now=None):
    """
    A booking may be cancelled while it is not cancelled already and starts
    at least MIN_CANCEL_HOURS from now. Unparseable start times are never
    cancellable.
    """
    if status == STATUS_CANCELLED:
        return False

    try:
        return hours_until_start(booking_date, start_time, now=now) >= MIN_CANCEL_HOURS
    except (TypeError, ValueError) as e:
        logger.warning(f"Cannot evaluate cancellation window for {booking_date} {start_time!r}: {e}")
        return False
