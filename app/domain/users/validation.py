"""
Validation rules for user input.

Pure functions over raw input values. Every broken rule is reported,
in a fixed order, so callers can join the messages into one error.
"""

import re
from dataclasses import dataclass, field

EMAIL_PATTERN = re.compile(r"^[^\s@]+@[^\s@]+\.[^\s@]+$")
NAME_MIN_LENGTH = 2

NAME_REQUIRED = "Name is required"
NAME_EMPTY = "Name cannot be empty"
NAME_TOO_SHORT = f"Name must be at least {NAME_MIN_LENGTH} characters long"
EMAIL_REQUIRED = "Email is required"
EMAIL_EMPTY = "Email cannot be empty"
EMAIL_INVALID = "Email format is invalid"


@dataclass(frozen=True)
class ValidationResult:
    """Outcome of validating one input.

    Attributes:
        errors: Broken rules, in check order. Empty when valid.
    """

    errors: list[str] = field(default_factory=list)

    @property
    def is_valid(self) -> bool:
        return not self.errors


def _trimmed(value: object) -> str:
    # Non-string input counts as empty.
    return value.strip() if isinstance(value, str) else ""


def is_valid_email(email: str) -> bool:
    return EMAIL_PATTERN.match(email) is not None


class UserValidator:
    """Checks user input for create and partial update."""

    def validate_create(self, name: object, email: object) -> ValidationResult:
        """Validate a full user record.

        Args:
            name: Raw name value, possibly missing (None) or not a string.
            email: Raw email value, possibly missing (None) or not a string.

        Returns:
            The broken rules, if any.
        """
        errors: list[str] = []

        trimmed_name = _trimmed(name)
        if not trimmed_name:
            errors.append(NAME_REQUIRED)
        elif len(trimmed_name) < NAME_MIN_LENGTH:
            errors.append(NAME_TOO_SHORT)

        trimmed_email = _trimmed(email)
        if not trimmed_email:
            errors.append(EMAIL_REQUIRED)
        elif not is_valid_email(trimmed_email):
            errors.append(EMAIL_INVALID)

        return ValidationResult(errors=errors)

    def validate_update(self, name: object, email: object) -> ValidationResult:
        """Validate a partial update. ``None`` means the field is absent.

        An empty name breaks both the non-empty rule and the length rule.
        """
        errors: list[str] = []

        if name is not None:
            trimmed_name = _trimmed(name)
            if not trimmed_name:
                errors.append(NAME_EMPTY)
            if len(trimmed_name) < NAME_MIN_LENGTH:
                errors.append(NAME_TOO_SHORT)

        if email is not None:
            trimmed_email = _trimmed(email)
            if not trimmed_email:
                errors.append(EMAIL_EMPTY)
            elif not is_valid_email(trimmed_email):
                errors.append(EMAIL_INVALID)

        return ValidationResult(errors=errors)
