"""
Domain error taxonomy and the error-to-status mapping table.

All errors raised from the domain and application layers must be
defined here. They are mapped to HTTP responses at the interface layer
by the central error handler. No framework imports allowed.

The set of kinds is closed: adding a kind means adding an ErrorKind
member, a DomainError subclass and a STATUS_BY_KIND entry.
"""

from enum import Enum
from types import MappingProxyType
from typing import Mapping

INTERNAL_STATUS = 500

LEGACY_VALIDATION_MARKER = "Validation failed"


class ErrorKind(Enum):
    """Closed set of failure categories used by business logic."""

    VALIDATION = "Validation"
    NOT_FOUND = "NotFound"
    BAD_REQUEST = "BadRequest"
    UNAUTHORIZED = "Unauthorized"
    FORBIDDEN = "Forbidden"
    CONFLICT = "Conflict"
    INTERNAL = "Internal"

    @property
    def error_name(self) -> str:
        """Class-style name of the kind, e.g. ``NotFoundError``."""
        if self is ErrorKind.INTERNAL:
            return "InternalServerError"
        return f"{self.value}Error"


STATUS_BY_KIND: Mapping[ErrorKind, int] = MappingProxyType(
    {
        ErrorKind.VALIDATION: 400,
        ErrorKind.BAD_REQUEST: 400,
        ErrorKind.UNAUTHORIZED: 401,
        ErrorKind.FORBIDDEN: 403,
        ErrorKind.NOT_FOUND: 404,
        ErrorKind.CONFLICT: 409,
        ErrorKind.INTERNAL: 500,
    }
)

_KIND_BY_NAME: Mapping[str, ErrorKind] = MappingProxyType(
    {
        **{kind.value: kind for kind in ErrorKind},
        **{kind.error_name: kind for kind in ErrorKind},
    }
)


def kind_from_name(name: object) -> ErrorKind | None:
    """Resolve a kind name (``NotFound``) or error name (``NotFoundError``).

    Args:
        name: Candidate name. Non-string values never match.

    Returns:
        The matching ErrorKind, or None.
    """
    if isinstance(name, ErrorKind):
        return name
    if not isinstance(name, str):
        return None
    return _KIND_BY_NAME.get(name)


def status_of(kind: ErrorKind | str) -> int:
    """Return the HTTP status code for an error kind.

    Unknown kinds and names fall back to 500.
    """
    resolved = kind_from_name(kind)
    if resolved is None:
        return INTERNAL_STATUS
    return STATUS_BY_KIND.get(resolved, INTERNAL_STATUS)


def is_legacy_validation_message(text: str) -> bool:
    """Legacy rule: any message containing ``Validation failed`` is a 400."""
    return LEGACY_VALIDATION_MARKER in text


class DomainError(Exception):
    """Base error for all domain errors.

    Attributes:
        kind: The failure category. Fixed per subclass.
        message: Human-readable text, safe to show to a client.
    """

    kind: ErrorKind = ErrorKind.INTERNAL

    def __init__(self, message: str) -> None:
        self.message = message
        super().__init__(self.message)

    @property
    def name(self) -> str:
        return self.kind.error_name

    @property
    def status_code(self) -> int:
        return status_of(self.kind)


class ValidationError(DomainError):
    """Raised when input data breaks one or more business rules."""

    kind = ErrorKind.VALIDATION


class NotFoundError(DomainError):
    """Raised when a required resource does not exist."""

    kind = ErrorKind.NOT_FOUND


class BadRequestError(DomainError):
    """Raised when a request cannot be interpreted (bad id, bad JSON)."""

    kind = ErrorKind.BAD_REQUEST


class UnauthorizedError(DomainError):
    """Raised when the caller is not authenticated."""

    kind = ErrorKind.UNAUTHORIZED


class ForbiddenError(DomainError):
    """Raised when the caller may not perform the operation."""

    kind = ErrorKind.FORBIDDEN


class ConflictError(DomainError):
    """Raised when the operation conflicts with current state."""

    kind = ErrorKind.CONFLICT


class InternalServerError(DomainError):
    """Raised for failures that are never the caller's fault."""

    kind = ErrorKind.INTERNAL
