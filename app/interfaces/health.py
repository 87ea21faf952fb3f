"""
Health and hello routers.

Provides a health endpoint for liveness/readiness probes and a
hello endpoint that echoes the request line. No business logic.
"""

from fastapi import APIRouter, Depends, Request

from app.core.config import Settings
from app.interfaces.dependencies import get_app_settings
from app.interfaces.schemas import HealthResponse, HelloResponse
from app.shared.envelopes import utc_timestamp

HELLO_MESSAGE = "Hello from FastAPI!"

router = APIRouter(tags=["health"])


@router.get(
    "/health",
    response_model=HealthResponse,
    summary="Health check",
    description="Returns application health status and environment.",
)
def health_check(settings: Settings = Depends(get_app_settings)) -> HealthResponse:
    """Return current application health status."""
    return HealthResponse(
        status="ok",
        timestamp=utc_timestamp(),
        environment=settings.environment,
    )


@router.get(
    "/hello",
    response_model=HelloResponse,
    summary="Hello",
    description="Returns a greeting with the request method and path.",
)
def hello(request: Request) -> HelloResponse:
    """Greet the caller."""
    return HelloResponse(
        message=HELLO_MESSAGE,
        method=request.method,
        path=request.url.path,
        timestamp=utc_timestamp(),
    )
