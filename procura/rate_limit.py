"""Rate limiting yapilandirmasi (slowapi)."""

from slowapi import Limiter
from slowapi.util import get_remote_address

from procura.config import settings

# Client IP bazli rate limiter
# Limitler endpoint bazinda @limiter.limit(...) ile verilir
limiter = Limiter(
    key_func=get_remote_address,
    enabled=settings.RATE_LIMIT_ENABLED,
)
