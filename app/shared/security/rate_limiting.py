"""
Rate limiting configuration and setup.

Uses slowapi to enforce a default per-client rate limit on every route.
Protects against denial-of-service and resource abuse.
"""

import logging

from slowapi import Limiter
from slowapi.errors import RateLimitExceeded
from slowapi.util import get_remote_address
from starlette.requests import Request
from starlette.responses import JSONResponse

from app.core.config import Settings
from app.shared.envelopes import error_envelope

logger = logging.getLogger(__name__)

HTTP_429 = 429
RATE_LIMIT_MESSAGE = "Rate limit exceeded"


def build_limiter(settings: Settings) -> Limiter:
    """Create a limiter keyed by client address.

    Args:
        settings: Supplies the default limit and the on/off switch.
    """
    return Limiter(
        key_func=get_remote_address,
        default_limits=[settings.rate_limit_default],
        enabled=settings.rate_limit_enabled,
    )


def rate_limit_exceeded_handler(
    request: Request, exc: RateLimitExceeded
) -> JSONResponse:
    """Handle rate limit exceeded errors with the standard error envelope.

    Args:
        request: The incoming HTTP request.
        exc: The rate limit exceeded exception.

    Returns:
        A 429 JSON response. One warning is logged per rejection.
    """
    message = f"{RATE_LIMIT_MESSAGE}: {exc.detail}"
    logger.warning(
        "%s %s failed: %s",
        request.method,
        request.url.path,
        message,
        extra={
            "meta": {
                "method": request.method,
                "path": request.url.path,
                "status": HTTP_429,
                "client": get_remote_address(request),
            }
        },
    )
    return JSONResponse(status_code=HTTP_429, content=error_envelope(message))
