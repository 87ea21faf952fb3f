"""
Typed client for the Starter API.

Each resource gets a small API class; ApiClient bundles them.
Responses are parsed into the same Pydantic schemas the server uses.
"""

from typing import Any

from app.client.http_client import HttpClient
from app.interfaces.schemas import HealthResponse, HelloResponse
from app.interfaces.users.schemas import UserItem

API_PREFIX = "/api"


class UsersApi:
    """Operations on ``/api/users``."""

    def __init__(self, http: HttpClient, prefix: str = API_PREFIX) -> None:
        self._http = http
        self._base = f"{prefix}/users"

    def get_all_users(self) -> list[UserItem]:
        body = self._http.get(self._base)
        return [UserItem.model_validate(item) for item in body.get("data") or []]

    def get_user_by_id(self, user_id: int) -> UserItem:
        body = self._http.get(f"{self._base}/{user_id}")
        return self._user_from(body, f"User with ID {user_id} not found")

    def create_user(self, name: str, email: str) -> UserItem:
        body = self._http.post(self._base, {"name": name, "email": email})
        return self._user_from(body, "Failed to create user")

    def update_user(
        self, user_id: int, name: str | None = None, email: str | None = None
    ) -> UserItem:
        """Send a partial update; only the given fields are sent."""
        changes = {
            key: value
            for key, value in (("name", name), ("email", email))
            if value is not None
        }
        body = self._http.put(f"{self._base}/{user_id}", changes)
        return self._user_from(body, f"Failed to update user with ID {user_id}")

    def delete_user(self, user_id: int) -> None:
        self._http.delete(f"{self._base}/{user_id}")

    @staticmethod
    def _user_from(body: Any, failure: str) -> UserItem:
        data = body.get("data") if isinstance(body, dict) else None
        if not data:
            raise ValueError(failure)
        return UserItem.model_validate(data)


class HealthApi:
    """Operations on ``/api/health``."""

    def __init__(self, http: HttpClient, prefix: str = API_PREFIX) -> None:
        self._http = http
        self._url = f"{prefix}/health"

    def check_health(self) -> HealthResponse:
        return HealthResponse.model_validate(self._http.get(self._url))


class HelloApi:
    """Operations on ``/api/hello``."""

    def __init__(self, http: HttpClient, prefix: str = API_PREFIX) -> None:
        self._http = http
        self._url = f"{prefix}/hello"

    def get_hello(self) -> HelloResponse:
        return HelloResponse.model_validate(self._http.get(self._url))


class ApiClient:
    """Facade over every resource API.

    Usage:
        with ApiClient("http://localhost:3000") as api:
            api.users.create_user("Ada Lovelace", "ada@example.com")
    """

    def __init__(
        self,
        base_url: str = "",
        prefix: str = API_PREFIX,
        http: HttpClient | None = None,
    ) -> None:
        self.http = http or HttpClient(base_url)
        self.users = UsersApi(self.http, prefix)
        self.health = HealthApi(self.http, prefix)
        self.hello = HelloApi(self.http, prefix)

    def __enter__(self) -> "ApiClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.http.close()
