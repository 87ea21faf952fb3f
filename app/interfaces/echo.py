"""
Catch-all router.

Answers any GET under the API prefix that no other route claims,
echoing the path and query. Must be included after every other router.
"""

from fastapi import APIRouter, Request

from app.interfaces.schemas import EchoResponse
from app.shared.envelopes import utc_timestamp

router = APIRouter(tags=["echo"])


@router.get(
    "/{path:path}",
    response_model=EchoResponse,
    summary="Echo",
    description="Echo an unclaimed GET path with its query parameters.",
)
def echo(path: str, request: Request) -> EchoResponse:
    """Describe the request that reached the catch-all."""
    return EchoResponse(
        message=f"You reached: {request.url.path}",
        method=request.method,
        params={"path": path},
        query=dict(request.query_params),
        timestamp=utc_timestamp(),
    )
