"""
Tests for the structlog-backed JSON log formatter.
"""

import json
import logging
import sys

from app.shared.logging import build_json_formatter


def _record(level: int, message: str, meta: dict | None = None, exc_info=None) -> logging.LogRecord:
    record = logging.LogRecord(
        name="UserService",
        level=level,
        pathname=__file__,
        lineno=1,
        msg=message,
        args=(),
        exc_info=exc_info,
    )
    if meta is not None:
        record.meta = meta
    return record


def _render(record: logging.LogRecord) -> dict:
    return json.loads(build_json_formatter().format(record))


class TestJsonFormatter:
    def test_base_fields(self) -> None:
        entry = _render(_record(logging.INFO, "Creating user"))
        assert set(entry) == {"timestamp", "level", "context", "message"}
        assert entry["level"] == "INFO"
        assert entry["context"] == "UserService"
        assert entry["message"] == "Creating user"
        assert entry["timestamp"].endswith("Z")

    def test_meta_is_included(self) -> None:
        entry = _render(_record(logging.WARNING, "User not found", {"userId": 7}))
        assert entry["level"] == "WARN"
        assert entry["meta"] == {"userId": 7}

    def test_exception_adds_error_and_stack(self) -> None:
        try:
            raise RuntimeError("disk full")
        except RuntimeError:
            exc_info = sys.exc_info()
        entry = _render(_record(logging.ERROR, "Unhandled error", exc_info=exc_info))
        assert entry["level"] == "ERROR"
        assert entry["error"] == "disk full"
        assert "Traceback" in entry["stack"]
        assert "RuntimeError" in entry["stack"]

    def test_critical_maps_to_fatal(self) -> None:
        assert _render(_record(logging.CRITICAL, "down"))["level"] == "FATAL"

    def test_original_record_keeps_its_exception(self) -> None:
        try:
            raise ValueError("bad")
        except ValueError:
            exc_info = sys.exc_info()
        record = _record(logging.ERROR, "failed", exc_info=exc_info)
        build_json_formatter().format(record)
        assert record.exc_info is exc_info
