"""
Rate limiting configuration and setup.

Uses slowapi to enforce a per-client request budget on every endpoint.
One Limiter is built per application so each app keeps its own counters.
"""

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings
from app.shared.errors.handlers import error_response

RATE_LIMIT_MESSAGE = "Muitas requisições deste IP, tente novamente mais tarde."


def build_limiter(settings: Settings) -> Limiter:
    """Create a Limiter keyed by client address with the configured default limit."""
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    _request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with a clean JSON response.

    Kept synchronous: SlowAPIMiddleware calls the handler without awaiting.

    Args:
        _request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response in the standard error envelope.
    """
    return error_response(
        429,
        RATE_LIMIT_MESSAGE,
        "RATE_LIMIT_EXCEEDED",
        details=f"Limite: {exc.detail}",
    )
