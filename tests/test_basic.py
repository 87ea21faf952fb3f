"""
Basic application tests.

Validates that the FastAPI app starts correctly and the health,
hello and catch-all endpoints respond as expected, with CORS,
request logging and rate limiting wired in.
"""

import logging

import pytest
from fastapi.testclient import TestClient

from app.core.config import Settings
from app.main import create_app


class TestHealthEndpoint:
    """Tests for the health check endpoint."""

    def test_health_returns_200(self, client: TestClient) -> None:
        """Health endpoint must return HTTP 200 with status ok."""
        response = client.get("/api/health")
        assert response.status_code == 200
        assert response.json()["status"] == "ok"

    def test_health_response_body(self, client: TestClient) -> None:
        """Health endpoint must return timestamp and environment fields."""
        body = client.get("/api/health").json()
        assert body["environment"] == "test"
        assert "timestamp" in body


class TestHelloEndpoint:
    def test_hello_echoes_request_line(self, client: TestClient) -> None:
        body = client.get("/api/hello").json()
        assert body["message"] == "Hello from FastAPI!"
        assert body["method"] == "GET"
        assert body["path"] == "/api/hello"
        assert "timestamp" in body


class TestCatchAll:
    def test_unclaimed_get_path_is_echoed(self, client: TestClient) -> None:
        response = client.get("/api/custom-path", params={"param": "value"})
        assert response.status_code == 200
        body = response.json()
        assert body["message"] == "You reached: /api/custom-path"
        assert body["method"] == "GET"
        assert body["query"] == {"param": "value"}
        assert body["params"] == {"path": "custom-path"}


class TestCors:
    """Tests for CORS handling."""

    def test_simple_request_allows_any_origin(self, client: TestClient) -> None:
        response = client.get("/api/health", headers={"Origin": "https://example.org"})
        assert response.headers["access-control-allow-origin"] == "*"

    def test_preflight(self, client: TestClient) -> None:
        response = client.options(
            "/api/users",
            headers={
                "Origin": "https://example.org",
                "Access-Control-Request-Method": "PUT",
                "Access-Control-Request-Headers": "Content-Type, Authorization",
            },
        )
        assert response.status_code == 200
        allowed = response.headers["access-control-allow-methods"]
        for method in ("GET", "POST", "PUT", "PATCH", "DELETE", "OPTIONS"):
            assert method in allowed

    def test_error_responses_carry_cors_headers(self, client: TestClient) -> None:
        response = client.get("/api/users/999", headers={"Origin": "https://example.org"})
        assert response.status_code == 404
        assert response.headers["access-control-allow-origin"] == "*"


class TestRequestLogging:
    def test_logs_request_and_response(
        self, client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        with caplog.at_level(logging.INFO, logger="app.shared.middleware"):
            client.get("/api/health")
        messages = [r.getMessage() for r in caplog.records if r.name == "app.shared.middleware"]
        assert messages[0] == "--> GET /api/health"
        assert messages[1].startswith("<-- GET /api/health 200")


@pytest.fixture
def limited_client() -> TestClient:
    """App allowing two requests per minute per client."""
    settings = Settings(
        _env_file=None,
        rate_limit_enabled=True,
        rate_limit_default="2/minute",
        log_json=False,
    )
    with TestClient(create_app(settings)) as test_client:
        yield test_client


class TestRateLimiting:
    """Tests for rate limiting behavior."""

    def test_rate_limit_returns_429(self, limited_client: TestClient) -> None:
        """Exceeding rate limit returns HTTP 429 with the error envelope."""
        assert limited_client.get("/api/health").status_code == 200
        assert limited_client.get("/api/health").status_code == 200
        response = limited_client.get("/api/health")
        assert response.status_code == 429
        body = response.json()
        assert body["success"] is False
        assert body["error"].startswith("Rate limit exceeded")

    def test_rejection_logs_one_warning(
        self, limited_client: TestClient, caplog: pytest.LogCaptureFixture
    ) -> None:
        for _ in range(3):
            limited_client.get("/api/health")
        records = [
            r for r in caplog.records if r.name == "app.shared.security.rate_limiting"
        ]
        assert len(records) == 1
        assert records[0].levelno == logging.WARNING
        assert records[0].meta["status"] == 429
