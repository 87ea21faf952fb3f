"""
Port interfaces (ABCs) for the users bounded context.

Ports define the contracts that the domain requires from the outside world.
Infrastructure adapters implement these interfaces.
The domain layer never depends on concrete implementations.
"""

from abc import ABC, abstractmethod

from app.domain.users.entities import NewUser, User, UserChanges


class UserRepository(ABC):
    """Port for storing and retrieving users.

    Lookups return None (or False) for unknown ids instead of raising,
    so callers choose between "absent" and "error" per endpoint.
    """

    @abstractmethod
    def find_by_id(self, user_id: int) -> User | None:
        """Return the user with the given id, or None if not found."""
        raise NotImplementedError

    @abstractmethod
    def find_all(self) -> list[User]:
        """Return a snapshot of all users, ordered by insertion."""
        raise NotImplementedError

    @abstractmethod
    def create(self, new_user: NewUser) -> User:
        """Persist a new user and return it with its assigned id.

        Args:
            new_user: Validated user data.

        Returns:
            The stored User, including id and created_at.
        """
        raise NotImplementedError

    @abstractmethod
    def update(self, user_id: int, changes: UserChanges) -> User | None:
        """Apply a partial update.

        Args:
            user_id: Id of the user to update.
            changes: Fields to replace; omitted fields are kept.

        Returns:
            The updated User, or None if the id is unknown.
        """
        raise NotImplementedError

    @abstractmethod
    def delete(self, user_id: int) -> bool:
        """Remove a user. Returns False if the id is unknown."""
        raise NotImplementedError
