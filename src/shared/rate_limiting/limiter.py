"""Rate limiting shared by the application and feature routers."""

from fastapi import Request
from fastapi.responses import JSONResponse
from slowapi import Limiter
from slowapi.util import get_remote_address

from src.config.settings import settings


def current_rate_limit() -> str:
    """Limit string read from settings on every request."""
    return settings.rate_limit


# Route decorators cover feature routers; default_limits covers app-level routes via SlowAPIMiddleware.
limiter = Limiter(
    key_func=get_remote_address,
    default_limits=[current_rate_limit],
    enabled=settings.rate_limit_enabled,
)


def rate_limit_handler(request: Request, exc: Exception) -> JSONResponse:
    """Handle rate limit exceeded errors.

    Must stay synchronous: SlowAPIMiddleware replaces coroutine handlers
    with its own default handler.
    """
    return JSONResponse(
        status_code=429,
        content={"detail": "Rate limit exceeded"},
    )
