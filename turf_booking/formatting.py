"""
Display formatting shared by pages, the manager panel and emails.

Prices are shown the en-IN way: rupee sign, lakh/crore digit grouping
(1,00,000) and no fractional part.
"""
from datetime import date, datetime
from decimal import Decimal, InvalidOperation, ROUND_HALF_UP

from django.utils import dateformat, numberformat

CURRENCY_SYMBOL = '₹'

# 3 digits, then groups of 2 repeated
INDIAN_GROUPING = (3, 2, 0)

SHORT_DATE_FORMAT = 'D, j M Y'
LONG_DATE_FORMAT = 'l, j F Y'
ADMIN_DATE_FORMAT = 'j M Y'


def format_price(price):
    """
    Format an amount as Indian rupees with zero fractional digits.

    >>> format_price(1200)
    '₹1,200'
    >>> format_price(Decimal('150000.50'))
    '₹1,50,001'
    """
    try:
        amount = Decimal(str(price if price is not None else 0))
    except (InvalidOperation, ValueError):
        amount = Decimal('0')

    amount = amount.quantize(Decimal('1'), rounding=ROUND_HALF_UP)
    sign = '-' if amount < 0 else ''

    digits = numberformat.format(
        abs(amount),
        decimal_sep='.',
        decimal_pos=0,
        grouping=INDIAN_GROUPING,
        thousand_sep=',',
        force_grouping=True,
        use_l10n=False,
    )
    return f"{sign}{CURRENCY_SYMBOL}{digits}"


def _as_date(value):
    if isinstance(value, datetime):
        return value.date()
    if isinstance(value, date):
        return value
    return datetime.strptime(str(value)[:10], '%Y-%m-%d').date()


def format_date(value, style='short'):
    """
    Format a booking date.

    Styles:
        short - "Mon, 10 Jun 2024" (booking cards)
        long  - "Monday, 10 June 2024" (emails)
        admin - "10 Jun 2024" (manager tables)
    """
    formats = {
        'short': SHORT_DATE_FORMAT,
        'long': LONG_DATE_FORMAT,
        'admin': ADMIN_DATE_FORMAT,
    }
    if style not in formats:
        raise ValueError(f"Unknown date style: {style}")

    return dateformat.format(_as_date(value), formats[style])


def format_status(status):
    """"confirmed" -> "Confirmed" for status badges."""
    if not status:
        return ''
    return status[:1].upper() + status[1:]
