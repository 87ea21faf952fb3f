"""
Response envelopes shared by routes and error handlers.

Success: ``{success: true, data?, message?, timestamp}``
Error:   ``{success: false, error, timestamp}``

The timestamp is the server time when the envelope is built.
"""

from datetime import datetime, timezone
from typing import Any


def utc_timestamp() -> str:
    """Current server time as an ISO-8601 string."""
    return datetime.now(timezone.utc).isoformat()


def success_envelope(data: Any = None, message: str | None = None) -> dict[str, Any]:
    """Build a success envelope. ``data`` and ``message`` are omitted when None."""
    body: dict[str, Any] = {"success": True}
    if data is not None:
        body["data"] = data
    if message is not None:
        body["message"] = message
    body["timestamp"] = utc_timestamp()
    return body


def error_envelope(error: str) -> dict[str, Any]:
    """Build an error envelope."""
    return {"success": False, "error": error, "timestamp": utc_timestamp()}
