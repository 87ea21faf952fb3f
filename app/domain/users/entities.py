"""
Domain entities for the users bounded context.

Entities represent core business objects with identity and lifecycle.
They contain no framework imports and no IO operations.
"""

from dataclasses import dataclass, replace
from datetime import datetime


@dataclass(frozen=True)
class User:
    """A registered user.

    Attributes:
        id: Positive integer identity, assigned by the repository.
        name: Display name, at least 2 characters after trimming.
        email: Address in ``local@domain.tld`` shape.
        created_at: Server-assigned creation time (UTC).
    """

    id: int
    name: str
    email: str
    created_at: datetime


@dataclass(frozen=True)
class NewUser:
    """The data needed to create a user. Identity is assigned on save."""

    name: str
    email: str


@dataclass(frozen=True)
class UserChanges:
    """A partial update. ``None`` means the field was not provided."""

    name: str | None = None
    email: str | None = None

    def is_empty(self) -> bool:
        return self.name is None and self.email is None

    def apply_to(self, user: User) -> User:
        """Merge the provided fields into ``user``.

        Identity and creation time are never touched.

        Args:
            user: The current state of the entity.

        Returns:
            A new User with the provided fields replaced.
        """
        merged = user
        if self.name is not None:
            merged = replace(merged, name=self.name)
        if self.email is not None:
            merged = replace(merged, email=self.email)
        return merged
