"""
Pydantic schemas shared by every router.

These schemas define the API contract shown in the OpenAPI document.
No business logic belongs here.
"""

from typing import Any

from pydantic import BaseModel


class HealthResponse(BaseModel):
    """Response schema for the health check endpoint."""

    status: str
    timestamp: str
    environment: str


class HelloResponse(BaseModel):
    """Response schema for the hello endpoint."""

    message: str
    method: str
    path: str
    timestamp: str


class EchoResponse(BaseModel):
    """Response schema for the catch-all route."""

    message: str
    method: str
    params: dict[str, str]
    query: dict[str, str]
    timestamp: str


class MessageEnvelope(BaseModel):
    """Success envelope carrying only a message."""

    success: bool = True
    message: str
    timestamp: str


class ErrorResponse(BaseModel):
    """Standard error envelope returned by all error handlers."""

    success: bool = False
    error: str
    timestamp: str


ERROR_RESPONSES: dict[int | str, dict[str, Any]] = {
    400: {"model": ErrorResponse, "description": "Invalid id, body or input"},
    404: {"model": ErrorResponse, "description": "Resource not found"},
    500: {"model": ErrorResponse, "description": "Internal server error"},
}
