"""
JSON-over-HTTP client.

Thin wrapper over ``httpx.Client`` that sends JSON, decodes JSON, and
turns non-2xx responses into HttpError with the server's message.

Usage:
    client = HttpClient("http://localhost:3000")
    users = client.get("/api/users")
"""

import logging
from typing import Any, Mapping

import httpx

logger = logging.getLogger(__name__)

DEFAULT_HEADERS = {"Content-Type": "application/json"}
DEFAULT_TIMEOUT_SECONDS = 30.0

# Methods that never carry a request body.
_BODYLESS_METHODS = frozenset({"GET", "DELETE"})


class HttpError(Exception):
    """Raised for any non-2xx response.

    Attributes:
        message: Best available error text from the response.
        status: HTTP status code.
        reason: HTTP reason phrase.
        url: Requested URL.
        response: Decoded response body (JSON or text), if any.
    """

    def __init__(
        self,
        message: str,
        status: int,
        reason: str,
        url: str,
        response: Any = None,
    ) -> None:
        self.message = message
        self.status = status
        self.reason = reason
        self.url = url
        self.response = response
        super().__init__(self.message)


class NetworkError(Exception):
    """Raised when the request never produced a response."""


def _error_message(response: httpx.Response) -> tuple[str, Any]:
    """Extract a readable message from an error response."""
    message = f"HTTP {response.status_code}: {response.reason_phrase}"
    content_type = response.headers.get("content-type", "")
    if "application/json" in content_type:
        try:
            body = response.json()
        except ValueError:
            return message, None
        if isinstance(body, dict):
            for key in ("error", "message", "detail"):
                if body.get(key):
                    return str(body[key]), body
        return message, body

    text = response.text
    return (text or message), text


class HttpClient:
    """Synchronous JSON HTTP client.

    Args:
        base_url: Prefix for relative request paths.
        headers: Extra default headers, merged over the JSON defaults.
        timeout: Request timeout in seconds.
        transport: Optional httpx transport (tests pass ``httpx.MockTransport``).
    """

    def __init__(
        self,
        base_url: str = "",
        headers: Mapping[str, str] | None = None,
        timeout: float = DEFAULT_TIMEOUT_SECONDS,
        transport: httpx.BaseTransport | None = None,
    ) -> None:
        self._client = httpx.Client(
            base_url=base_url,
            headers={**DEFAULT_HEADERS, **(headers or {})},
            timeout=timeout,
            transport=transport,
        )

    def __enter__(self) -> "HttpClient":
        return self

    def __exit__(self, *exc_info: object) -> None:
        self.close()

    def close(self) -> None:
        self._client.close()

    def get(self, url: str, **kwargs: Any) -> Any:
        return self.request("GET", url, **kwargs)

    def post(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        return self.request("POST", url, data, **kwargs)

    def put(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        return self.request("PUT", url, data, **kwargs)

    def patch(self, url: str, data: Any = None, **kwargs: Any) -> Any:
        return self.request("PATCH", url, data, **kwargs)

    def delete(self, url: str, **kwargs: Any) -> Any:
        return self.request("DELETE", url, **kwargs)

    def request(
        self,
        method: str,
        url: str,
        data: Any = None,
        params: Mapping[str, str | int | float | bool] | None = None,
        headers: Mapping[str, str] | None = None,
    ) -> Any:
        """Send a request and decode the response.

        Args:
            method: HTTP verb.
            url: Absolute URL or path relative to the base URL.
            data: JSON body. Ignored for GET and DELETE.
            params: Query string parameters.
            headers: Per-request headers.

        Returns:
            Decoded JSON, text for non-JSON bodies, or ``{}`` for empty responses.

        Raises:
            HttpError: If the server answered with a non-2xx status.
            NetworkError: If the request failed before a response arrived.
        """
        send_body = data is not None and method.upper() not in _BODYLESS_METHODS
        try:
            response = self._client.request(
                method,
                url,
                json=data if send_body else None,
                params=params,
                headers=headers,
            )
        except httpx.TransportError as exc:
            logger.warning("Network request failed: %s %s: %s", method, url, exc)
            raise NetworkError(f"Network request failed: {exc}") from exc

        if not response.is_success:
            message, body = _error_message(response)
            raise HttpError(
                message,
                status=response.status_code,
                reason=response.reason_phrase,
                url=str(response.request.url),
                response=body,
            )

        if response.status_code == 204 or not response.content:
            return {}
        if "application/json" in response.headers.get("content-type", ""):
            return response.json()
        return response.text
