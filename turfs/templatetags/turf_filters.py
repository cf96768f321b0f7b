from django import template

from turf_booking.formatting import format_date, format_price, format_status

register = template.Library()


@register.filter
def inr(value):
    return format_price(value)


@register.filter
def booking_date(value, style='short'):
    if not value:
        return ''
    return format_date(value, style)


@register.filter
def status_label(value):
    return format_status(value)
