"""
Dependency injection for the API.

Provides FastAPI dependency functions that wire infrastructure
adapters, logging and configuration into services via constructor
injection. These are the composition root for request handlers.

The repository is a process-wide singleton; services are built per
request. Tests replace any provider through ``app.dependency_overrides``.
"""

import logging
from functools import lru_cache

from fastapi import Depends, Request

from app.application.users.user_service import UserService
from app.core.config import Settings, get_settings
from app.domain.users.ports import UserRepository
from app.domain.users.validation import UserValidator
from app.infrastructure.users.in_memory_user_repository import InMemoryUserRepository
from app.shared.logging import API_LOGGER_NAME

__all__ = [
    "get_app_settings",
    "get_logger",
    "get_settings",
    "get_user_repository",
    "get_user_service",
    "get_user_validator",
]


def get_logger() -> logging.Logger:
    """Return the logger injected into route handlers and services."""
    return logging.getLogger(API_LOGGER_NAME)


@lru_cache
def get_user_repository() -> UserRepository:
    """Return the shared in-memory user repository."""
    return InMemoryUserRepository()


def get_user_validator() -> UserValidator:
    return UserValidator()


def get_user_service(
    repository: UserRepository = Depends(get_user_repository),
    validator: UserValidator = Depends(get_user_validator),
    logger: logging.Logger = Depends(get_logger),
) -> UserService:
    """Build UserService with its infrastructure dependencies."""
    return UserService(repository=repository, validator=validator, logger=logger)


def get_app_settings(request: Request) -> Settings:
    """Return the settings the running application was built with."""
    return getattr(request.app.state, "settings", None) or get_settings()
