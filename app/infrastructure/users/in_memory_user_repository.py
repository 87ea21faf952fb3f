"""
Adapter: In-memory user storage.

Implements UserRepository port.
The collection lives in process memory and is lost on restart.
"""

import threading
from datetime import datetime, timezone

from app.domain.users.entities import NewUser, User, UserChanges
from app.domain.users.ports import UserRepository

SEED_USERS: tuple[User, ...] = (
    User(
        id=1,
        name="John Doe",
        email="john@example.com",
        created_at=datetime(2024, 1, 1, tzinfo=timezone.utc),
    ),
    User(
        id=2,
        name="Jane Smith",
        email="jane@example.com",
        created_at=datetime(2024, 1, 2, tzinfo=timezone.utc),
    ),
)


class InMemoryUserRepository(UserRepository):
    """List-backed adapter for user data.

    Every read-modify-write sequence (id assignment then append,
    find then replace, find then remove) runs under one lock, so
    concurrent requests cannot lose updates or reuse an id.
    """

    def __init__(self, seed: bool = True) -> None:
        self._lock = threading.Lock()
        self._users: list[User] = list(SEED_USERS) if seed else []

    def reset(self, seed: bool = True) -> None:
        """Drop all users and optionally restore the seed data."""
        with self._lock:
            self._users = list(SEED_USERS) if seed else []

    def find_by_id(self, user_id: int) -> User | None:
        with self._lock:
            return self._find(user_id)

    def find_all(self) -> list[User]:
        with self._lock:
            return list(self._users)

    def create(self, new_user: NewUser) -> User:
        with self._lock:
            next_id = max((u.id for u in self._users), default=0) + 1
            user = User(
                id=next_id,
                name=new_user.name,
                email=new_user.email,
                created_at=datetime.now(timezone.utc),
            )
            self._users.append(user)
            return user

    def update(self, user_id: int, changes: UserChanges) -> User | None:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return None
            updated = changes.apply_to(self._users[index])
            self._users[index] = updated
            return updated

    def delete(self, user_id: int) -> bool:
        with self._lock:
            index = self._index_of(user_id)
            if index is None:
                return False
            del self._users[index]
            return True

    def _find(self, user_id: int) -> User | None:
        index = self._index_of(user_id)
        return None if index is None else self._users[index]

    def _index_of(self, user_id: int) -> int | None:
        for index, user in enumerate(self._users):
            if user.id == user_id:
                return index
        return None
