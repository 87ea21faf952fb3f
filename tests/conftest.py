"""
Shared fixtures.

Every test gets a fresh application with rate limiting disabled and
its own seeded in-memory repository, so tests never share state.
"""

import pytest
from fastapi import FastAPI
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.infrastructure.users.in_memory_user_repository import InMemoryUserRepository
from app.interfaces.dependencies import get_user_repository
from app.main import create_app


@pytest.fixture
def settings() -> Settings:
    return Settings(
        _env_file=None,
        environment="test",
        rate_limit_enabled=False,
        log_json=False,
    )


@pytest.fixture
def repository() -> InMemoryUserRepository:
    """Repository seeded with John Doe (id 1) and Jane Smith (id 2)."""
    return InMemoryUserRepository()


@pytest.fixture
def app(settings: Settings, repository: InMemoryUserRepository) -> FastAPI:
    application = create_app(settings)
    application.dependency_overrides[get_user_repository] = lambda: repository
    return application


@pytest.fixture
def client(app: FastAPI) -> TestClient:
    with TestClient(app) as test_client:
        yield test_client
