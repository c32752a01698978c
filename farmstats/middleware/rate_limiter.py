"""
Shared rate limiter for API routes.
"""
from slowapi import Limiter
from slowapi.util import get_remote_address

from farmstats.config import settings


limiter = Limiter(key_func=get_remote_address)

# Limit string applied to every API route
DEFAULT_LIMIT = f"{settings.rate_limit_requests}/minute"

RATE_LIMIT_RESPONSE = {
    429: {
        "description": "Rate limit exceeded",
    }
}
