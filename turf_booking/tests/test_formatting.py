from datetime import date, datetime
from decimal import Decimal

import pytest

from turf_booking.formatting import format_date, format_price, format_status


@pytest.mark.parametrize('price, expected', [
    (1200, '₹1,200'),
    (Decimal('1200.00'), '₹1,200'),
    (0, '₹0'),
    (999, '₹999'),
    (100000, '₹1,00,000'),
    (12345678, '₹1,23,45,678'),
    (Decimal('150000.50'), '₹1,50,001'),
    (Decimal('1499.49'), '₹1,499'),
    ('1500', '₹1,500'),
])
def test_format_price_uses_indian_grouping(price, expected):
    assert format_price(price) == expected


def test_format_price_treats_missing_values_as_zero():
    assert format_price(None) == '₹0'
    assert format_price('n/a') == '₹0'


def test_format_price_keeps_sign():
    assert format_price(-2500) == '-₹2,500'


def test_format_date_styles():
    day = date(2024, 6, 10)
    assert format_date(day) == 'Mon, 10 Jun 2024'
    assert format_date(day, 'long') == 'Monday, 10 June 2024'
    assert format_date(day, 'admin') == '10 Jun 2024'


def test_format_date_accepts_iso_strings_and_datetimes():
    assert format_date('2024-06-10', 'long') == 'Monday, 10 June 2024'
    assert format_date(datetime(2024, 6, 10, 18, 30), 'admin') == '10 Jun 2024'


def test_format_date_rejects_unknown_style():
    with pytest.raises(ValueError):
        format_date(date(2024, 6, 10), 'iso')


def test_format_status():
    assert format_status('confirmed') == 'Confirmed'
    assert format_status('') == ''
