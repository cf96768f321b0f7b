"""
Rate limiting for booking endpoints
"""
from functools import wraps
import logging

from django.http import JsonResponse
from django_ratelimit.decorators import ratelimit

logger = logging.getLogger(__name__)


def api_ratelimit(key='ip', rate='30/m', method='ALL'):
    """
    Rate limit a JSON endpoint.

    Requests over the limit get a 429 JSON response instead of the
    default 403 from django-ratelimit.

    Args:
        key: grouping key (ip, user, user_or_ip, header:x-real-ip)
        rate: '<count>/<period>', e.g. '10/m', '100/h', '1000/d'
        method: HTTP methods to count (ALL, GET, POST)
    """
    def decorator(func):
        @wraps(func)
        @ratelimit(group=f"{func.__module__}.{func.__qualname__}", key=key, rate=rate, method=method, block=False)
        def wrapper(request, *args, **kwargs):
            if getattr(request, 'limited', False):
                logger.warning(
                    f"Rate limit exceeded for {func.__name__}: "
                    f"key={key}, rate={rate}, "
                    f"ip={request.META.get('REMOTE_ADDR')}, "
                    f"user={request.user if request.user.is_authenticated else 'anonymous'}"
                )

                return JsonResponse({
                    'success': False,
                    'error': 'rate_limit_exceeded',
                    'message': 'Too many requests. Please wait a moment and try again.'
                }, status=429)

            return func(request, *args, **kwargs)

        return wrapper
    return decorator


def api_data_ratelimit(rate='60/m'):
    """Reads: 60 requests a minute by default"""
    return api_ratelimit(key='user_or_ip', rate=rate, method='GET')


def api_write_ratelimit(rate='10/m'):
    """Writes: 10 requests a minute per user by default"""
    return api_ratelimit(key='user_or_ip', rate=rate, method='POST')
