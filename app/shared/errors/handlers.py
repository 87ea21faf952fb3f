"""
Centralized error handling for FastAPI.

Every exception that escapes a route ends up here, exactly once.
Classification is ordered, first match wins:

1. A DomainError is mapped through the status table by its kind.
2. An error whose ``kind`` attribute, ``name`` attribute or class name
   names a table entry is mapped the same way.
3. Legacy rule: a message containing "Validation failed" is a 400.
4. Anything else is an internal failure (500).

No stack traces or internal details are exposed to clients.
All error responses use the error envelope.
"""

import logging
from dataclasses import dataclass

from fastapi import FastAPI, Request
from fastapi.exceptions import RequestValidationError
from fastapi.responses import JSONResponse
from starlette.exceptions import HTTPException as StarletteHTTPException
from starlette.middleware.base import BaseHTTPMiddleware, RequestResponseEndpoint
from starlette.responses import Response

from app.domain.errors import (
    INTERNAL_STATUS,
    DomainError,
    ErrorKind,
    is_legacy_validation_message,
    kind_from_name,
    status_of,
)
from app.shared.envelopes import error_envelope

logger = logging.getLogger(__name__)

HTTP_400 = 400
INTERNAL_ERROR_MESSAGE = "Internal server error"


@dataclass(frozen=True)
class ErrorResolution:
    """How an error is answered.

    Attributes:
        status_code: HTTP status of the response.
        client_message: Text placed in the envelope's ``error`` field.
        rule: Which classification step matched (typed, named, legacy, unhandled).
    """

    status_code: int
    client_message: str
    rule: str


def _client_message(status_code: int, message: str) -> str:
    return INTERNAL_ERROR_MESSAGE if status_code >= INTERNAL_STATUS else message


def _named_kind(exc: BaseException) -> ErrorKind | None:
    candidates = (
        getattr(exc, "kind", None),
        getattr(exc, "name", None),
        type(exc).__name__,
    )
    for candidate in candidates:
        kind = kind_from_name(candidate)
        if kind is not None:
            return kind
    return None


def classify_error(exc: BaseException) -> ErrorResolution:
    """Decide the status code and client-facing message for an error.

    Args:
        exc: Any exception that reached the handler.

    Returns:
        The resolution. Messages of 5xx resolutions are always generic.
    """
    if isinstance(exc, DomainError):
        status_code = status_of(exc.kind)
        return ErrorResolution(status_code, _client_message(status_code, exc.message), "typed")

    message = str(getattr(exc, "message", None) or exc)

    kind = _named_kind(exc)
    if kind is not None:
        status_code = status_of(kind)
        return ErrorResolution(status_code, _client_message(status_code, message), "named")

    if is_legacy_validation_message(message):
        return ErrorResolution(HTTP_400, message, "legacy")

    return ErrorResolution(INTERNAL_STATUS, INTERNAL_ERROR_MESSAGE, "unhandled")


def _log_error(request: Request, resolution: ErrorResolution, exc: BaseException) -> None:
    meta = {
        "method": request.method,
        "path": request.url.path,
        "status": resolution.status_code,
        "rule": resolution.rule,
        "errorType": type(exc).__name__,
    }
    if resolution.status_code < INTERNAL_STATUS:
        logger.warning(
            "%s %s failed: %s",
            request.method,
            request.url.path,
            resolution.client_message,
            extra={"meta": meta},
        )
    else:
        logger.error(
            "%s %s failed with %s: %s",
            request.method,
            request.url.path,
            type(exc).__name__,
            exc,
            exc_info=(type(exc), exc, exc.__traceback__),
            extra={"meta": meta},
        )


def _respond(request: Request, resolution: ErrorResolution, exc: BaseException) -> JSONResponse:
    _log_error(request, resolution, exc)
    return JSONResponse(
        status_code=resolution.status_code,
        content=error_envelope(resolution.client_message),
    )


def handle_error(request: Request, exc: BaseException) -> JSONResponse:
    """Translate an exception into one logged, enveloped JSON response."""
    return _respond(request, classify_error(exc), exc)


class ErrorHandlerMiddleware(BaseHTTPMiddleware):
    """Catch every exception raised below it and hand it to handle_error."""

    async def dispatch(
        self, request: Request, call_next: RequestResponseEndpoint
    ) -> Response:
        try:
            return await call_next(request)
        except Exception as exc:
            return handle_error(request, exc)


def register_error_handlers(app: FastAPI) -> None:
    """Register the central error handler on the FastAPI application.

    Framework errors (unknown route, wrong method, request validation)
    get the same envelope and logging as domain errors.

    Args:
        app: The FastAPI application instance.
    """

    @app.exception_handler(StarletteHTTPException)
    async def handle_http_exception(
        request: Request, exc: StarletteHTTPException
    ) -> JSONResponse:
        """Handle routing-level errors raised by the framework."""
        resolution = ErrorResolution(
            exc.status_code,
            _client_message(exc.status_code, str(exc.detail)),
            "http",
        )
        response = _respond(request, resolution, exc)
        if exc.headers:
            response.headers.update(exc.headers)
        return response

    @app.exception_handler(RequestValidationError)
    async def handle_request_validation(
        request: Request, exc: RequestValidationError
    ) -> JSONResponse:
        """Handle malformed parameters rejected before reaching a route."""
        details = ", ".join(str(error.get("msg", "")) for error in exc.errors())
        resolution = ErrorResolution(HTTP_400, f"Invalid request: {details}", "request")
        return _respond(request, resolution, exc)

    app.add_middleware(ErrorHandlerMiddleware)
