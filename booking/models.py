from django.contrib.auth.models import User
from django.db import models

from turfs.models import Turf

from .constants import STATUS_CANCELLED, STATUS_CONFIRMED, STATUS_PENDING
from .timeslots import can_cancel


class InvalidStatusTransition(Exception):
    """Raised when a booking status would move backwards."""


class Booking(models.Model):
    class Status(models.TextChoices):
        CONFIRMED = STATUS_CONFIRMED, 'Confirmed'
        PENDING = STATUS_PENDING, 'Pending'
        CANCELLED = STATUS_CANCELLED, 'Cancelled'

    turf = models.ForeignKey(Turf, on_delete=models.CASCADE, related_name='bookings')
    user = models.ForeignKey(User, on_delete=models.CASCADE, related_name='bookings')
    booking_date = models.DateField()
    start_time = models.CharField(max_length=16)
    end_time = models.CharField(max_length=16)
    total_price = models.DecimalField(max_digits=10, decimal_places=2)
    status = models.CharField(max_length=20, choices=Status.choices, default=Status.CONFIRMED)
    created_at = models.DateTimeField(auto_now_add=True)

    class Meta:
        ordering = ['-booking_date', '-created_at']
        indexes = [
            models.Index(fields=['turf', 'booking_date'], name='booking_turf_date_idx'),
            models.Index(fields=['user', 'booking_date'], name='booking_user_date_idx'),
        ]
        constraints = [
            # One active booking per turf slot; cancelled rows free the slot
            models.UniqueConstraint(
                fields=['turf', 'booking_date', 'start_time'],
                condition=~models.Q(status=STATUS_CANCELLED),
                name='booking_unique_active_slot',
            ),
        ]

    def __str__(self):
        return f"{self.user.username} - {self.turf.name} - {self.booking_date} {self.start_time}"

    @property
    def is_cancelled(self):
        return self.status == self.Status.CANCELLED

    def can_cancel(self, now=None):
        """Cancellable while not cancelled and at least 7 hours before the start"""
        return can_cancel(self.status, self.booking_date, self.start_time, now=now)

    def mark_cancelled(self):
        """Move to cancelled; the status never goes back."""
        if self.is_cancelled:
            raise InvalidStatusTransition(f"Booking {self.pk} is already cancelled")
        self.status = self.Status.CANCELLED
