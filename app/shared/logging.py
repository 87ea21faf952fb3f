"""
Logging configuration for the application.

Sets up structured logging with a consistent format.
Logging must not change program behavior.
Never logs sensitive data (secrets, raw payloads).

Two output modes:
- Text: the plain ``LOG_FORMAT`` line.
- JSON: one object per line rendered by structlog,
  ``{timestamp, level, context, message, meta?, error?, stack?}``.

Application code logs through the standard library and passes
structured metadata as ``extra={"meta": {...}}``.
"""

import logging
import sys

import structlog
from structlog.types import EventDict, Processor, WrappedLogger

LOG_FORMAT = "%(asctime)s | %(levelname)-8s | %(name)s | %(message)s"
LOG_DATE_FORMAT = "%Y-%m-%d %H:%M:%S"

API_LOGGER_NAME = "app.api"

# Short level names used in JSON output.
_LEVEL_NAMES = {"WARNING": "WARN", "CRITICAL": "FATAL"}


def _add_error(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Copy the exception text to ``error`` before the traceback is rendered."""
    exc_info = event_dict.get("exc_info")
    if isinstance(exc_info, tuple) and exc_info[1] is not None:
        event_dict["error"] = str(exc_info[1])
    return event_dict


def _to_entry_shape(_logger: WrappedLogger, _method: str, event_dict: EventDict) -> EventDict:
    """Rename structlog's keys to the published log line shape."""
    level = str(event_dict.get("level", "")).upper()
    entry: EventDict = {
        "timestamp": event_dict.get("timestamp"),
        "level": _LEVEL_NAMES.get(level, level),
        "context": event_dict.get("logger"),
        "message": event_dict.get("event"),
    }
    if event_dict.get("meta"):
        entry["meta"] = event_dict["meta"]
    if "error" in event_dict:
        entry["error"] = event_dict["error"]
    if "exception" in event_dict:
        entry["stack"] = event_dict["exception"]
    return entry


def _shared_processors() -> list[Processor]:
    return [
        structlog.stdlib.add_log_level,
        structlog.stdlib.add_logger_name,
        structlog.processors.TimeStamper(fmt="iso", utc=True),
        structlog.stdlib.ExtraAdder(allow=["meta"]),
    ]


def build_json_formatter() -> structlog.stdlib.ProcessorFormatter:
    """Return the formatter that renders records as JSON lines."""
    return structlog.stdlib.ProcessorFormatter(
        foreign_pre_chain=_shared_processors(),
        processors=[
            structlog.stdlib.ProcessorFormatter.remove_processors_meta,
            _add_error,
            structlog.processors.format_exc_info,
            _to_entry_shape,
            structlog.processors.JSONRenderer(),
        ],
    )


def configure_logging(level: str = "INFO", json_format: bool = True) -> None:
    """Configure logging for the application.

    Args:
        level: The log level string (DEBUG, INFO, WARNING, ERROR).
        json_format: Emit JSON lines instead of the plain text format.
    """
    handler = logging.StreamHandler(sys.stdout)
    if json_format:
        structlog.configure(
            processors=[
                *_shared_processors(),
                structlog.stdlib.ProcessorFormatter.wrap_for_formatter,
            ],
            logger_factory=structlog.stdlib.LoggerFactory(),
            wrapper_class=structlog.stdlib.BoundLogger,
            cache_logger_on_first_use=False,
        )
        handler.setFormatter(build_json_formatter())
    else:
        handler.setFormatter(logging.Formatter(LOG_FORMAT, datefmt=LOG_DATE_FORMAT))

    logging.basicConfig(
        level=getattr(logging, level.upper(), logging.INFO),
        handlers=[handler],
        force=True,
    )

    # Suppress noisy third-party loggers
    logging.getLogger("uvicorn.access").setLevel(logging.WARNING)
    logging.getLogger("uvicorn.error").setLevel(logging.WARNING)
