"""
HTTP entry points for booking emails, callable cross-origin.

CORS headers come from django-cors-headers (see CORS_URLS_REGEX).
"""
import json
import logging

from django.http import HttpResponse, JsonResponse
from django.views.decorators.csrf import csrf_exempt
from django.views.decorators.http import require_http_methods

from .services import (
    KIND_CANCELLATION,
    KIND_CONFIRMATION,
    BookingSummary,
    NotificationError,
    NotificationService,
)

logger = logging.getLogger(__name__)


def _preflight():
    return HttpResponse(status=200)


def _missing_field(data, required_fields):
    for field in required_fields:
        if not data.get(field):
            return field
    return None


@csrf_exempt
@require_http_methods(["POST", "OPTIONS"])
def booking_notification(request):
    """
    Compose a confirmation/cancellation email and log it without sending.

    POST /functions/booking-notification/
    Body: {type, email, booking: {id, date, startTime, turfName, price}}
    """
    if request.method == 'OPTIONS':
        return _preflight()

    try:
        data = json.loads(request.body)

        missing = _missing_field(data, ['type', 'email', 'booking'])
        if missing:
            return JsonResponse({'error': f'{missing} is required'}, status=400)

        if data['type'] not in (KIND_CONFIRMATION, KIND_CANCELLATION):
            return JsonResponse({'error': f"Unknown notification type: {data['type']}"}, status=400)

        summary = BookingSummary.from_payload(data['booking'])
        subject, body = NotificationService.compose(data['type'], summary, data['email'])

        logger.info(f"Email would be sent to: {data['email']}")
        logger.info(f"Subject: {subject}")
        logger.info(f"Body: {body}")

        return JsonResponse({'success': True, 'message': 'Notification processed'})

    except NotificationError as e:
        return JsonResponse({'error': str(e)}, status=400)
    except Exception as e:
        logger.error(f"Error processing notification: {e}", exc_info=True)
        return JsonResponse({'error': str(e)}, status=500)


@csrf_exempt
@require_http_methods(["POST", "OPTIONS"])
def send_booking_email(request):
    """
    Relay a ready-made HTML email through SMTP.

    POST /functions/send-booking-email/
    Body: {to, subject, body}
    """
    if request.method == 'OPTIONS':
        return _preflight()

    try:
        data = json.loads(request.body)

        missing = _missing_field(data, ['to', 'subject', 'body'])
        if missing:
            return JsonResponse({'success': False, 'error': f'{missing} is required'}, status=400)

        NotificationService.send_email(data['to'], data['subject'], data['body'])

        return JsonResponse({'success': True, 'message': 'Email sent successfully'})

    except Exception as e:
        logger.error(f"Error sending email: {e}", exc_info=True)
        return JsonResponse({'success': False, 'error': str(e)}, status=500)
