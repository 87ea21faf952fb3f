"""
Tests for the in-memory user repository adapter.
"""

import threading
from datetime import datetime, timezone

import pytest

from app.domain.users.entities import NewUser, UserChanges
from app.infrastructure.users.in_memory_user_repository import (
    SEED_USERS,
    InMemoryUserRepository,
)


@pytest.fixture
def repo() -> InMemoryUserRepository:
    return InMemoryUserRepository()


class TestReads:
    def test_find_all_returns_seeded_users(self, repo: InMemoryUserRepository) -> None:
        users = repo.find_all()
        assert [u.id for u in users] == [1, 2]
        assert users[0].name == "John Doe"
        assert users[1].email == "jane@example.com"

    def test_find_all_is_a_snapshot(self, repo: InMemoryUserRepository) -> None:
        snapshot = repo.find_all()
        snapshot.clear()
        assert len(repo.find_all()) == 2

    def test_find_by_id(self, repo: InMemoryUserRepository) -> None:
        user = repo.find_by_id(1)
        assert user is not None
        assert user.name == "John Doe"

    def test_find_by_id_missing_returns_none(self, repo: InMemoryUserRepository) -> None:
        assert repo.find_by_id(999) is None


class TestCreate:
    def test_assigns_next_id_and_creation_time(self, repo: InMemoryUserRepository) -> None:
        before = datetime.now(timezone.utc)
        user = repo.create(NewUser(name="Test User", email="test@example.com"))
        assert user.id == 3
        assert user.created_at >= before
        assert repo.find_by_id(3) == user

    def test_first_id_in_empty_store_is_one(self) -> None:
        repo = InMemoryUserRepository(seed=False)
        assert repo.create(NewUser(name="First", email="first@example.com")).id == 1

    def test_id_follows_the_highest_existing_id(self, repo: InMemoryUserRepository) -> None:
        repo.delete(1)
        assert repo.create(NewUser(name="New One", email="n@example.com")).id == 3

    def test_concurrent_creates_never_reuse_an_id(self) -> None:
        repo = InMemoryUserRepository(seed=False)
        barrier = threading.Barrier(8)

        def worker(index: int) -> None:
            barrier.wait()
            for n in range(25):
                repo.create(NewUser(name=f"User {index}-{n}", email=f"u{index}.{n}@example.com"))

        threads = [threading.Thread(target=worker, args=(i,)) for i in range(8)]
        for thread in threads:
            thread.start()
        for thread in threads:
            thread.join()

        ids = [u.id for u in repo.find_all()]
        assert len(ids) == 200
        assert sorted(ids) == list(range(1, 201))


class TestUpdate:
    def test_merges_fields(self, repo: InMemoryUserRepository) -> None:
        updated = repo.update(1, UserChanges(name="Johnny"))
        assert updated is not None
        assert updated.name == "Johnny"
        assert updated.email == "john@example.com"
        assert repo.find_by_id(1) == updated

    def test_missing_id_returns_none(self, repo: InMemoryUserRepository) -> None:
        assert repo.update(999, UserChanges(name="Nobody")) is None


class TestDelete:
    def test_removes_user(self, repo: InMemoryUserRepository) -> None:
        assert repo.delete(1) is True
        assert repo.find_by_id(1) is None
        assert [u.id for u in repo.find_all()] == [2]

    def test_second_delete_returns_false(self, repo: InMemoryUserRepository) -> None:
        assert repo.delete(2) is True
        assert repo.delete(2) is False


class TestReset:
    def test_restores_seed(self, repo: InMemoryUserRepository) -> None:
        repo.create(NewUser(name="Extra", email="extra@example.com"))
        repo.reset()
        assert tuple(repo.find_all()) == SEED_USERS

    def test_empties_store(self, repo: InMemoryUserRepository) -> None:
        repo.reset(seed=False)
        assert repo.find_all() == []
