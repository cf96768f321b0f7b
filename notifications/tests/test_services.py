from decimal import Decimal
from smtplib import SMTPException
from unittest import mock

import pytest
from django.core import mail

from notifications.services import (
    KIND_CANCELLATION, KIND_CONFIRMATION, BookingSummary, NotificationError, NotificationService,
)

SUMMARY = BookingSummary(
    id='42',
    date='2024-06-10',
    start_time='09:00 AM',
    turf_name='Green Field Arena',
    price=Decimal('1200'),
    end_time='10:00 AM',
)


def test_compose_confirmation():
    subject, body = NotificationService.compose(KIND_CONFIRMATION, SUMMARY, 'asha@example.com')

    assert subject == 'Booking Confirmed: Green Field Arena'
    assert 'Hello asha,' in body
    assert 'Monday, 10 June 2024' in body
    assert '₹1,200' in body
    assert '09:00 AM - 10:00 AM' in body


def test_compose_cancellation():
    subject, body = NotificationService.compose(KIND_CANCELLATION, SUMMARY)

    assert subject == 'Booking Cancelled: Green Field Arena'
    assert 'Hello Customer,' in body


def test_compose_rejects_unknown_kind():
    with pytest.raises(NotificationError):
        NotificationService.compose('reminder', SUMMARY)


def test_notify_sends_html_email():
    assert NotificationService.notify(KIND_CONFIRMATION, 'asha@example.com', SUMMARY) is True

    [message] = mail.outbox
    assert message.to == ['asha@example.com']
    assert 'Green Field Arena' in message.body
    assert message.alternatives[0][1] == 'text/html'


def test_notify_without_recipient_is_skipped():
    assert NotificationService.notify(KIND_CONFIRMATION, '', SUMMARY) is False
    assert mail.outbox == []


def test_notify_never_raises():
    with mock.patch('notifications.services.send_mail', side_effect=SMTPException('refused')):
        assert NotificationService.notify(KIND_CONFIRMATION, 'asha@example.com', SUMMARY) is False


def test_send_email_propagates_errors():
    with mock.patch('notifications.services.send_mail', side_effect=SMTPException('refused')):
        with pytest.raises(SMTPException):
            NotificationService.send_email('asha@example.com', 'Hi', '<p>Hi</p>')


def test_summary_from_payload():
    summary = BookingSummary.from_payload({
        'id': 7,
        'date': '2024-06-10',
        'startTime': '06:00 PM',
        'turfName': 'Kickoff Sports Hub',
        'price': 1500,
    })

    assert summary.id == '7'
    assert summary.start_time == '06:00 PM'
    assert summary.price == Decimal('1500')


def test_summary_from_payload_requires_fields():
    with pytest.raises(NotificationError, match='booking.turfName is required'):
        BookingSummary.from_payload({'id': 7, 'date': '2024-06-10', 'startTime': '06:00 PM', 'price': 1})


@pytest.mark.django_db
def test_summary_from_booking(make_booking):
    booking = make_booking()

    summary = BookingSummary.from_booking(booking)

    assert summary.id == str(booking.pk)
    assert summary.turf_name == 'Green Field Arena'
    assert summary.location == 'Gachibowli, Hyderabad'
    assert summary.end_time == '10:00 AM'
