"""
Data Transfer Objects for the users application layer.

DTOs carry raw input from the interface layer into the service.
Values are left untyped on purpose: validation belongs to the service.
"""

from dataclasses import dataclass


@dataclass(frozen=True)
class CreateUserCommand:
    """Input DTO for creating a user.

    Attributes:
        name: Raw name from the request body, None if missing.
        email: Raw email from the request body, None if missing.
    """

    name: object = None
    email: object = None


@dataclass(frozen=True)
class UpdateUserCommand:
    """Input DTO for a partial user update.

    Attributes:
        name: New name, or None to keep the current one.
        email: New email, or None to keep the current one.
    """

    name: object = None
    email: object = None
