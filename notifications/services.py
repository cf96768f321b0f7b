"""
Booking emails
"""
import logging
from dataclasses import dataclass
from decimal import Decimal

from django.conf import settings
from django.core.mail import send_mail
from django.template.loader import render_to_string
from django.utils.html import strip_tags

from turf_booking.formatting import format_date, format_price

logger = logging.getLogger(__name__)

KIND_CONFIRMATION = 'confirmation'
KIND_CANCELLATION = 'cancellation'


class NotificationError(Exception):
    """Raised for notification requests that cannot be composed."""


@dataclass(frozen=True)
class BookingSummary:
    """What an email needs to know about a booking."""

    id: str
    date: str
    start_time: str
    turf_name: str
    price: Decimal
    end_time: str = ''
    location: str = ''

    @classmethod
    def from_booking(cls, booking):
        turf = getattr(booking, 'turf', None)
        return cls(
            id=str(booking.pk),
            date=booking.booking_date.isoformat(),
            start_time=booking.start_time,
            turf_name=turf.name if turf else 'Unknown Turf',
            price=booking.total_price,
            end_time=booking.end_time,
            location=turf.location if turf else '',
        )

    @classmethod
    def from_payload(cls, data):
        """Build from the camelCase `booking` object of the notification function."""
        required = ['id', 'date', 'startTime', 'turfName', 'price']
        missing = [field for field in required if data.get(field) in (None, '')]
        if missing:
            raise NotificationError(f"booking.{missing[0]} is required")

        return cls(
            id=str(data['id']),
            date=str(data['date']),
            start_time=str(data['startTime']),
            turf_name=str(data['turfName']),
            price=Decimal(str(data['price'])),
        )


class NotificationService:
    """Compose and deliver booking emails"""

    EMAIL_TEMPLATES = {
        KIND_CONFIRMATION: {
            'subject': 'Booking Confirmed: {turf_name}',
            'template': 'emails/booking_confirmation.html',
        },
        KIND_CANCELLATION: {
            'subject': 'Booking Cancelled: {turf_name}',
            'template': 'emails/booking_cancellation.html',
        },
    }

    @staticmethod
    def compose(kind, summary, recipient=''):
        """
        Render subject and HTML body for a booking email.

        Returns:
            (subject, html_body)
        """
        template_info = NotificationService.EMAIL_TEMPLATES.get(kind)
        if not template_info:
            raise NotificationError(f"Unknown notification type: {kind}")

        context = {
            'booking': summary,
            'customer_name': recipient.split('@')[0] if recipient else 'Customer',
            'formatted_date': format_date(summary.date, 'long'),
            'formatted_price': format_price(summary.price),
            'site_name': getattr(settings, 'SITE_NAME', 'Turf Booking'),
            'site_url': getattr(settings, 'SITE_URL', 'http://localhost:8000'),
            'support_email': getattr(settings, 'SUPPORT_EMAIL', 'support@turfbooking.com'),
        }

        subject = template_info['subject'].format(turf_name=summary.turf_name)
        body = render_to_string(template_info['template'], context)
        return subject, body

    @staticmethod
    def send_email(to, subject, body):
        """
        Relay a fully formed HTML email through the configured mail backend.

        Errors propagate to the caller.
        """
        send_mail(
            subject=subject,
            message=strip_tags(body),
            from_email=settings.DEFAULT_FROM_EMAIL,
            recipient_list=[to],
            html_message=body,
            fail_silently=False,
        )
        logger.info(f"Email sent to {to}: {subject}")

    @staticmethod
    def notify(kind, recipient, summary):
        """
        Best-effort booking email.

        Never raises: the booking or cancellation that triggered it has
        already been saved, so failures are only logged.
        """
        if not recipient:
            logger.warning(f"No email address for booking {summary.id}, {kind} email skipped")
            return False

        try:
            subject, body = NotificationService.compose(kind, summary, recipient)
            NotificationService.send_email(recipient, subject, body)
            return True
        except Exception as e:
            logger.error(f"Error sending {kind} email for booking {summary.id} to {recipient}: {e}", exc_info=True)
            return False

    @staticmethod
    def notify_booking_confirmed(booking):
        return NotificationService.notify(
            KIND_CONFIRMATION,
            booking.user.email,
            BookingSummary.from_booking(booking),
        )

    @staticmethod
    def notify_booking_cancelled(booking):
        return NotificationService.notify(
            KIND_CANCELLATION,
            booking.user.email,
            BookingSummary.from_booking(booking),
        )
