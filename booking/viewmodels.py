"""
Display records for the booking pages
"""
from dataclasses import dataclass, replace
from datetime import date
from decimal import Decimal

from django.utils import timezone

from turf_booking.formatting import format_date, format_price, format_status
from turfs.models import PLACEHOLDER_IMAGE

from .constants import STATUS_CANCELLED, UNKNOWN_TURF_LOCATION, UNKNOWN_TURF_NAME
from .timeslots import can_cancel


@dataclass(frozen=True)
class BookingCard:
    """One booking as shown on the My Bookings page."""

    id: int
    booking_date: date
    start_time: str
    end_time: str
    total_price: Decimal
    status: str
    turf_name: str = UNKNOWN_TURF_NAME
    turf_location: str = UNKNOWN_TURF_LOCATION
    turf_image: str = PLACEHOLDER_IMAGE
    can_cancel: bool = False

    @classmethod
    def from_booking(cls, booking, now=None):
        turf = booking.turf if booking.turf_id else None
        return cls(
            id=booking.pk,
            booking_date=booking.booking_date,
            start_time=booking.start_time,
            end_time=booking.end_time,
            total_price=booking.total_price,
            status=booking.status,
            turf_name=(turf.name if turf else '') or UNKNOWN_TURF_NAME,
            turf_location=(turf.location if turf else '') or UNKNOWN_TURF_LOCATION,
            turf_image=(turf.image if turf else '') or PLACEHOLDER_IMAGE,
            can_cancel=can_cancel(booking.status, booking.booking_date, booking.start_time, now=now),
        )

    @property
    def formatted_date(self):
        return format_date(self.booking_date, 'short')

    @property
    def formatted_price(self):
        return format_price(self.total_price)

    @property
    def status_label(self):
        return format_status(self.status)

    @property
    def is_cancelled(self):
        return self.status == STATUS_CANCELLED


def build_booking_cards(bookings, now=None):
    """Snapshot a booking queryset; eligibility is evaluated once against `now`."""
    now = now or timezone.now()
    return [BookingCard.from_booking(booking, now=now) for booking in bookings]


def apply_cancellation(cards, booking_id):
    """
    Return a new card list with `booking_id` marked cancelled.

    Other cards are returned unchanged; an unknown id leaves the list as is.
    """
    return [
        replace(card, status=STATUS_CANCELLED, can_cancel=False) if card.id == booking_id else card
        for card in cards
    ]
