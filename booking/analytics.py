"""
Manager dashboard figures: counts, revenue and the latest bookings
"""
from dataclasses import dataclass, field
from datetime import date
from decimal import Decimal

from django.contrib.auth.models import User
from django.db.models import Count, Q, Sum
from django.utils import timezone

from turf_booking.formatting import format_date, format_price, format_status
from users.utils import get_user_label

from .constants import (
    RECENT_BOOKINGS_LIMIT, STATUS_CANCELLED, UNKNOWN_TURF_NAME,
)
from .models import Booking


@dataclass(frozen=True)
class AdminBookingRow:
    """A booking row in the manager tables, with the user already resolved."""

    id: int
    booking_date: date
    start_time: str
    end_time: str
    total_price: Decimal
    status: str
    created_at: object = None
    turf_name: str = UNKNOWN_TURF_NAME
    user_label: str = ''

    @classmethod
    def from_booking(cls, booking):
        turf = booking.turf if booking.turf_id else None
        return cls(
            id=booking.pk,
            booking_date=booking.booking_date,
            start_time=booking.start_time,
            end_time=booking.end_time,
            total_price=booking.total_price,
            status=booking.status,
            created_at=booking.created_at,
            turf_name=(turf.name if turf else '') or UNKNOWN_TURF_NAME,
            user_label=get_user_label(booking.user),
        )

    @property
    def formatted_date(self):
        return format_date(self.booking_date, 'admin')

    @property
    def formatted_price(self):
        return format_price(self.total_price)

    @property
    def status_label(self):
        return format_status(self.status)

    def as_dict(self):
        return {
            'id': self.id,
            'turf_name': self.turf_name,
            'user': self.user_label,
            'date': self.booking_date.isoformat(),
            'date_formatted': self.formatted_date,
            'time': f"{self.start_time} - {self.end_time}",
            'price': float(self.total_price),
            'price_formatted': self.formatted_price,
            'status': self.status,
        }


@dataclass(frozen=True)
class DashboardStats:
    total_users: int = 0
    total_bookings: int = 0
    active_bookings: int = 0
    total_revenue: Decimal = Decimal('0')
    recent_bookings: list = field(default_factory=list)

    @property
    def formatted_revenue(self):
        return format_price(self.total_revenue)

    def as_dict(self):
        return {
            'total_users': self.total_users,
            'total_bookings': self.total_bookings,
            'active_bookings': self.active_bookings,
            'total_revenue': float(self.total_revenue),
            'total_revenue_formatted': self.formatted_revenue,
            'recent_bookings': [row.as_dict() for row in self.recent_bookings],
        }


def compute_dashboard_stats(bookings, total_users, today=None):
    """
    Aggregate an already loaded booking collection.

    `bookings` must be ordered newest first; the recent list is its head.
    Active bookings are the non-cancelled ones dated today or later, and
    revenue is the sum of total_price over every non-cancelled booking.
    """
    today = today or timezone.localdate()

    active = 0
    revenue = Decimal('0')
    for booking in bookings:
        if booking.status == STATUS_CANCELLED:
            continue
        revenue += Decimal(booking.total_price)
        if booking.booking_date >= today:
            active += 1

    return DashboardStats(
        total_users=total_users,
        total_bookings=len(bookings),
        active_bookings=active,
        total_revenue=revenue,
        recent_bookings=list(bookings[:RECENT_BOOKINGS_LIMIT]),
    )


def load_dashboard_bookings():
    """Every booking with its turf and user label, newest first."""
    bookings = Booking.objects.select_related(
        'turf', 'user', 'user__profile'
    ).order_by('-created_at')
    return [AdminBookingRow.from_booking(booking) for booking in bookings]


def get_dashboard_stats(today=None):
    rows = load_dashboard_bookings()
    return compute_dashboard_stats(rows, User.objects.count(), today=today)


def get_revenue_by_turf():
    """Non-cancelled revenue and booking count per turf, highest revenue first"""
    return list(
        Booking.objects.exclude(
            status=STATUS_CANCELLED
        ).values(
            'turf__id', 'turf__name'
        ).annotate(
            revenue=Sum('total_price'),
            bookings_count=Count('id')
        ).order_by('-revenue')
    )


def get_status_breakdown():
    """Booking counts per status"""
    counts = Booking.objects.aggregate(
        confirmed=Count('id', filter=Q(status=Booking.Status.CONFIRMED)),
        pending=Count('id', filter=Q(status=Booking.Status.PENDING)),
        cancelled=Count('id', filter=Q(status=Booking.Status.CANCELLED)),
    )
    return counts
