"""
Shared fixtures for the user service tests.
"""
from datetime import datetime, timezone
from typing import Callable, Dict, List, Optional
from unittest.mock import AsyncMock
from uuid import UUID, uuid4

import pytest
from databases import Database

from userservice.core.repository import Repository
from userservice.modules.migration_runner import run_migrations
from userservice.modules.users.domain.user import User
from userservice.modules.users.repositories.user_repository import UserRepository
from userservice.modules.users.services.user_service import UserService


class InMemoryUserRepository(Repository[User]):
    """Dict-backed user store with the same stamping rules as the SQL repository."""

    def __init__(self):
        self.users: Dict[UUID, User] = {}

    async def get_by_id(self, entity_id) -> Optional[User]:
        return self.users.get(entity_id)

    async def get_all(self) -> List[User]:
        return list(self.users.values())

    async def find(self, predicate: Callable[[User], bool]) -> List[User]:
        return [user for user in self.users.values() if predicate(user)]

    async def get_by_email(self, email: str) -> Optional[User]:
        for user in self.users.values():
            if user.email.lower() == email.lower():
                return user
        return None

    async def add(self, entity: User) -> None:
        now = datetime.now(timezone.utc)
        entity.created_at = now
        entity.updated_at = now
        self.users[entity.id] = entity

    async def update(self, entity: User) -> None:
        entity.updated_at = datetime.now(timezone.utc)
        self.users[entity.id] = entity

    async def delete(self, entity: User) -> None:
        entity.is_active = False
        entity.updated_at = datetime.now(timezone.utc)


@pytest.fixture
def repository():
    """Mocked user repository; lookups find nothing by default."""
    repo = AsyncMock(spec=UserRepository)
    repo.get_by_id.return_value = None
    repo.get_by_email.return_value = None
    repo.get_all.return_value = []
    repo.find.return_value = []
    return repo


@pytest.fixture
def service(repository):
    return UserService(repository)


@pytest.fixture
def memory_repository():
    return InMemoryUserRepository()


@pytest.fixture
def existing_user():
    """A persisted user as a repository would return it."""
    created = datetime(2024, 1, 1, 12, 0, tzinfo=timezone.utc)
    return User(
        id=uuid4(),
        email="john@doe.com",
        full_name="John Doe",
        is_active=True,
        created_at=created,
        updated_at=created,
    )


@pytest.fixture
async def sqlite_db(tmp_path):
    """Fresh SQLite database with the migrations applied."""
    db = Database(f"sqlite:///{tmp_path / 'users.db'}")
    await db.connect()
    await run_migrations(db)
    yield db
    await db.disconnect()
