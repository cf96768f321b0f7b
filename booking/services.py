"""
Booking lifecycle: create, list, cancel, slot availability
"""
import logging

from django.db import IntegrityError, transaction
from django.utils import timezone

from notifications.services import NotificationService

from .models import Booking
from .timeslots import TIME_SLOTS, can_cancel, derive_end_time, hours_until_start, normalize_slot

logger = logging.getLogger(__name__)


class BookingError(Exception):
    """Base class for booking errors shown to the player."""


class BookingValidationError(BookingError):
    """The booking request is incomplete or invalid."""


class SlotUnavailableError(BookingError):
    """Another booking already holds the slot."""


class CancellationNotAllowed(BookingError):
    """The booking is outside the cancellation window or already cancelled."""


ACTIVE_STATUSES = [Booking.Status.CONFIRMED, Booking.Status.PENDING]


class BookingService:
    """Booking operations used by the player-facing views"""

    @staticmethod
    def create_booking(turf, user, booking_date, start_time, now=None):
        """
        Book one of the fixed one-hour slots at the turf's price.

        The confirmation email is sent after the booking is saved; a failure
        there is logged and does not affect the booking.

        Raises:
            BookingValidationError: missing or invalid date/time, or a slot
                that is not offered or has already started
            SlotUnavailableError: the slot is already taken
        """
        if not turf or not booking_date or not start_time:
            raise BookingValidationError("Please select a date and time slot")

        now = now or timezone.now()
        if booking_date < timezone.localdate(now):
            raise BookingValidationError("Bookings cannot be made for past dates")

        try:
            start_time = normalize_slot(start_time)
        except ValueError:
            raise BookingValidationError("Please select a valid time slot")

        if start_time not in TIME_SLOTS:
            raise BookingValidationError("Please select a valid time slot")

        if hours_until_start(booking_date, start_time, now=now) <= 0:
            raise BookingValidationError("This time slot has already started")

        end_time = derive_end_time(start_time)

        try:
            with transaction.atomic():
                taken = Booking.objects.select_for_update().filter(
                    turf=turf,
                    booking_date=booking_date,
                    start_time=start_time,
                    status__in=ACTIVE_STATUSES,
                )
                if taken.exists():
                    raise SlotUnavailableError(f"{start_time} on {booking_date} is already booked")

                booking = Booking.objects.create(
                    turf=turf,
                    user=user,
                    booking_date=booking_date,
                    start_time=start_time,
                    end_time=end_time,
                    total_price=turf.price,
                    status=Booking.Status.CONFIRMED,
                )
        except IntegrityError:
            # A concurrent request saved the same slot first
            raise SlotUnavailableError(f"{start_time} on {booking_date} is already booked")

        logger.info(
            f"Booking created: User {user.username} booked {turf.name} "
            f"on {booking_date} from {start_time} to {end_time} (Price: {booking.total_price})"
        )

        try:
            NotificationService.notify_booking_confirmed(booking)
        except Exception as e:
            logger.error(f"Confirmation email failed for booking {booking.id}: {e}", exc_info=True)

        return booking

    @staticmethod
    def list_user_bookings(user):
        """All bookings of a user with their turf, newest booking date first."""
        return Booking.objects.filter(
            user=user
        ).select_related(
            'turf'
        ).order_by(
            '-booking_date', '-created_at'
        )

    @staticmethod
    def get_user_booking(booking_id, user):
        """Raises Booking.DoesNotExist for other users' bookings."""
        return Booking.objects.select_related('turf').get(id=booking_id, user=user)

    @staticmethod
    def cancel_booking(booking_id, user, now=None):
        """
        Cancel one of the user's bookings.

        No version check is made: two concurrent cancels both pass the
        window check and the second one wins.

        Raises:
            Booking.DoesNotExist: not found or not the user's booking
            CancellationNotAllowed: already cancelled or less than 7 hours to go
        """
        booking = BookingService.get_user_booking(booking_id, user)

        if booking.is_cancelled:
            raise CancellationNotAllowed("This booking is already cancelled")

        if not can_cancel(booking.status, booking.booking_date, booking.start_time, now=now):
            raise CancellationNotAllowed(
                "Bookings can only be cancelled at least 7 hours before the start time."
            )

        booking.mark_cancelled()
        booking.save(update_fields=['status'])

        logger.info(f"Booking {booking.id} cancelled by user {user.username}")

        try:
            NotificationService.notify_booking_cancelled(booking)
        except Exception as e:
            logger.error(f"Cancellation email failed for booking {booking.id}: {e}", exc_info=True)

        return booking

    @staticmethod
    def get_available_slots(turf, booking_date, now=None):
        """
        The fixed daily slots for a turf, each flagged available unless
        booked or already started.
        """
        now = now or timezone.now()

        booked = set(
            Booking.objects.filter(
                turf=turf,
                booking_date=booking_date,
                status__in=ACTIVE_STATUSES,
            ).values_list('start_time', flat=True)
        )

        slots = []
        for start_time in TIME_SLOTS:
            started = hours_until_start(booking_date, start_time, now=now) <= 0
            slots.append({
                'start_time': start_time,
                'end_time': derive_end_time(start_time),
                'is_available': start_time not in booked and not started,
            })
        return slots
