"""
FastAPI router for the users bounded context.

All routes delegate to UserService. No business logic here.
Path ids and JSON bodies are decoded here; rule checks happen in the
service. Nothing is caught locally: every failure propagates to the
centralized error handler.
"""

import logging
import re
from typing import Any

from fastapi import APIRouter, Depends, Request
from fastapi.responses import JSONResponse

from app.application.users.dtos import CreateUserCommand, UpdateUserCommand
from app.application.users.user_service import UserService
from app.domain.errors import BadRequestError, NotFoundError
from app.interfaces.dependencies import get_logger, get_user_service
from app.interfaces.schemas import ERROR_RESPONSES, MessageEnvelope
from app.interfaces.users.schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    UserEnvelope,
    UserItem,
    UserListEnvelope,
)
from app.shared.envelopes import success_envelope

HTTP_201 = 201

INVALID_USER_ID = "Invalid user ID"
INVALID_JSON_BODY = "Invalid JSON body"
USER_NOT_FOUND = "User not found"
USER_ID_PATTERN = re.compile(r"[+-]?[0-9]+")

router = APIRouter(prefix="/users", tags=["users"])


def parse_user_id(raw: str) -> int:
    """Parse a path segment as a user id.

    Raises:
        BadRequestError: If the segment is not a decimal integer.
    """
    text = raw.strip()
    if USER_ID_PATTERN.fullmatch(text) is None:
        raise BadRequestError(INVALID_USER_ID)
    try:
        return int(text)
    except ValueError as exc:
        # Digit strings past the interpreter conversion limit.
        raise BadRequestError(INVALID_USER_ID) from exc


async def read_json_object(request: Request) -> dict[str, Any]:
    """Decode the request body as a JSON object.

    Raises:
        BadRequestError: If the body is empty, malformed, nested too deeply,
            or not an object.
    """
    try:
        body = await request.json()
    except (ValueError, RecursionError) as exc:
        raise BadRequestError(INVALID_JSON_BODY) from exc
    if not isinstance(body, dict):
        raise BadRequestError(INVALID_JSON_BODY)
    return body


@router.get(
    "",
    response_model=UserListEnvelope,
    summary="List users",
    description="Return every user in the store.",
)
def list_users(
    service: UserService = Depends(get_user_service),
    logger: logging.Logger = Depends(get_logger),
) -> JSONResponse:
    """List all users."""
    logger.info("GET /users endpoint called")
    users = service.get_all_users()
    return JSONResponse(
        content=success_envelope(data=[UserItem.from_entity(u).to_json() for u in users])
    )


@router.get(
    "/{user_id}",
    response_model=UserEnvelope,
    responses=ERROR_RESPONSES,
    summary="Get a user",
    description="Return one user by id.",
)
def get_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
    logger: logging.Logger = Depends(get_logger),
) -> JSONResponse:
    """Get a single user by id."""
    parsed_id = parse_user_id(user_id)
    logger.info("GET /users/:id endpoint called", extra={"meta": {"userId": parsed_id}})

    user = service.get_user_by_id(parsed_id)
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return JSONResponse(content=success_envelope(data=UserItem.from_entity(user).to_json()))


@router.post(
    "",
    status_code=HTTP_201,
    response_model=UserEnvelope,
    responses=ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": CreateUserRequest.model_json_schema()}
            },
        }
    },
    summary="Create a user",
    description="Validate and store a new user.",
)
async def create_user(
    request: Request,
    service: UserService = Depends(get_user_service),
    logger: logging.Logger = Depends(get_logger),
) -> JSONResponse:
    """Create a user from a JSON body with name and email."""
    body = await read_json_object(request)
    logger.info("POST /users endpoint called")

    user = service.create_user(
        CreateUserCommand(name=body.get("name"), email=body.get("email"))
    )
    return JSONResponse(
        status_code=HTTP_201,
        content=success_envelope(
            data=UserItem.from_entity(user).to_json(),
            message="User created successfully",
        ),
    )


@router.put(
    "/{user_id}",
    response_model=UserEnvelope,
    responses=ERROR_RESPONSES,
    openapi_extra={
        "requestBody": {
            "required": True,
            "content": {
                "application/json": {"schema": UpdateUserRequest.model_json_schema()}
            },
        }
    },
    summary="Update a user",
    description="Apply a partial update; omitted fields are kept.",
)
async def update_user(
    user_id: str,
    request: Request,
    service: UserService = Depends(get_user_service),
    logger: logging.Logger = Depends(get_logger),
) -> JSONResponse:
    """Partially update a user."""
    parsed_id = parse_user_id(user_id)
    body = await read_json_object(request)
    logger.info("PUT /users/:id endpoint called", extra={"meta": {"userId": parsed_id}})

    user = service.update_user(
        parsed_id,
        UpdateUserCommand(name=body.get("name"), email=body.get("email")),
    )
    if user is None:
        raise NotFoundError(USER_NOT_FOUND)
    return JSONResponse(
        content=success_envelope(
            data=UserItem.from_entity(user).to_json(),
            message=f"User {parsed_id} updated successfully",
        )
    )


@router.delete(
    "/{user_id}",
    response_model=MessageEnvelope,
    responses=ERROR_RESPONSES,
    summary="Delete a user",
    description="Remove a user by id.",
)
def delete_user(
    user_id: str,
    service: UserService = Depends(get_user_service),
    logger: logging.Logger = Depends(get_logger),
) -> JSONResponse:
    """Delete a user."""
    parsed_id = parse_user_id(user_id)
    logger.info("DELETE /users/:id endpoint called", extra={"meta": {"userId": parsed_id}})

    if not service.delete_user(parsed_id):
        raise NotFoundError(USER_NOT_FOUND)
    return JSONResponse(
        content=success_envelope(message=f"User {parsed_id} deleted successfully")
    )
