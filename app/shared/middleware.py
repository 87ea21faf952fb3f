"""
Request logging middleware.

Logs one line when a request arrives and one when its response
leaves, with status and elapsed time. No business logic.
Never logs request bodies.
"""

import logging
import time

from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.requests import Request
from starlette.responses import Response

logger = logging.getLogger(__name__)


class RequestLoggingMiddleware(BaseHTTPMiddleware):
    """Middleware that logs the request line and the response status."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        """Time the request and log its outcome."""
        started = time.perf_counter()
        logger.info("--> %s %s", request.method, request.url.path)

        response = await call_next(request)

        elapsed_ms = (time.perf_counter() - started) * 1000
        logger.info(
            "<-- %s %s %d %.1fms",
            request.method,
            request.url.path,
            response.status_code,
            elapsed_ms,
            extra={
                "meta": {
                    "method": request.method,
                    "path": request.url.path,
                    "status": response.status_code,
                    "elapsedMs": round(elapsed_ms, 1),
                }
            },
        )
        return response
