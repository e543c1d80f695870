"""
Social API: Test Configuration (conftest.py)
==============================================

What:  Shared pytest fixtures for the entire test suite.
How:   pytest auto-discovers conftest.py and makes fixtures available to all tests.

Fixture Hierarchy (all function-scoped):
    ├── account_repo / message_repo: in-memory repositories for service tests
    ├── failing_account_repo / failing_message_repo: AsyncMock repositories
    │   whose every call raises StorageError
    ├── db_engine / db_session: temporary SQLite database (aiosqlite)
    └── test_client: HTTPX AsyncClient bound to the app, with the request
        session redirected to the temporary database
"""

import os

# Override settings for testing BEFORE any app imports
os.environ["DATABASE_URL"] = "sqlite+aiosqlite:///./test.db"
os.environ["LOG_LEVEL"] = "WARNING"

from typing import AsyncGenerator, Dict, List, Optional
from unittest.mock import AsyncMock

import pytest
import pytest_asyncio
from httpx import ASGITransport, AsyncClient
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine

from socialapi.database import Base, get_db_session
from socialapi.exceptions import StorageError
from socialapi.models.account import AccountRow  # noqa: F401
from socialapi.models.message import MessageRow  # noqa: F401
from socialapi.repositories.base import AccountRepositoryBase, MessageRepositoryBase
from socialapi.schemas.account import Account
from socialapi.schemas.message import Message


# ══════════════════════════════════════════════════════════════════════════
# In-Memory Repositories
# ══════════════════════════════════════════════════════════════════════════

class InMemoryAccountRepository(AccountRepositoryBase):
    """Dict-backed AccountRepositoryBase. Ids start at 1."""

    def __init__(self):
        self.rows: Dict[int, Account] = {}
        self._next_id = 1

    async def get_by_id(self, entity_id: int) -> Optional[Account]:
        row = self.rows.get(entity_id)
        return row.model_copy() if row else None

    async def get_all(self) -> List[Account]:
        return [row.model_copy() for row in self.rows.values()]

    async def find_by_username(self, username: str) -> Optional[Account]:
        for row in self.rows.values():
            if row.username == username:
                return row.model_copy()
        return None

    async def username_exists(self, username: str) -> bool:
        return await self.find_by_username(username) is not None

    async def find_by_credentials(self, username: str, password: str) -> Optional[Account]:
        for row in self.rows.values():
            if row.username == username and row.password == password:
                return row.model_copy()
        return None

    async def insert(self, entity: Account) -> Account:
        row = entity.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self.rows[row.id] = row
        return row.model_copy()

    async def update(self, entity: Account) -> bool:
        if entity.id not in self.rows:
            return False
        self.rows[entity.id] = self.rows[entity.id].model_copy(
            update={"password": entity.password}
        )
        return True

    async def delete(self, entity: Account) -> bool:
        return self.rows.pop(entity.id, None) is not None


class InMemoryMessageRepository(MessageRepositoryBase):
    """Dict-backed MessageRepositoryBase. Ids start at 1."""

    def __init__(self):
        self.rows: Dict[int, Message] = {}
        self._next_id = 1

    async def get_by_id(self, entity_id: int) -> Optional[Message]:
        row = self.rows.get(entity_id)
        return row.model_copy() if row else None

    async def get_all(self) -> List[Message]:
        return [row.model_copy() for row in self.rows.values()]

    async def get_by_posted_by(self, account_id: int) -> List[Message]:
        return [row.model_copy() for row in self.rows.values() if row.posted_by == account_id]

    async def insert(self, entity: Message) -> Message:
        row = entity.model_copy(update={"id": self._next_id})
        self._next_id += 1
        self.rows[row.id] = row
        return row.model_copy()

    async def update(self, entity: Message) -> bool:
        if entity.id not in self.rows:
            return False
        self.rows[entity.id] = entity.model_copy()
        return True

    async def delete(self, entity: Message) -> bool:
        return self.rows.pop(entity.id, None) is not None


# ══════════════════════════════════════════════════════════════════════════
# Repository Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest.fixture
def account_repo():
    return InMemoryAccountRepository()


@pytest.fixture
def message_repo():
    return InMemoryMessageRepository()


@pytest.fixture
def storage_error():
    return StorageError("Error while talking to the store", cause=ConnectionError("db down"))


@pytest.fixture
def failing_account_repo(storage_error):
    """
    An AccountRepositoryBase whose every method raises StorageError.

    Usage:
        service = AccountService(failing_account_repo)
        result = await service.get_all()
        assert result.kind is FailureKind.SERVICE_FAILURE
    """
    repo = AsyncMock(spec=AccountRepositoryBase)
    for name in (
        "get_by_id", "get_all", "insert", "update", "delete",
        "find_by_username", "username_exists", "find_by_credentials",
    ):
        getattr(repo, name).side_effect = storage_error
    return repo


@pytest.fixture
def failing_message_repo(storage_error):
    repo = AsyncMock(spec=MessageRepositoryBase)
    for name in ("get_by_id", "get_all", "insert", "update", "delete", "get_by_posted_by"):
        getattr(repo, name).side_effect = storage_error
    return repo


# ══════════════════════════════════════════════════════════════════════════
# Database Fixtures
# ══════════════════════════════════════════════════════════════════════════

@pytest_asyncio.fixture
async def db_engine(tmp_path):
    """
    A fresh SQLite database file with both tables created.

    Uses the same metadata Alembic migrates, so the UNIQUE constraint on
    account.username is present.
    """
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'social.db'}")
    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(db_engine) -> AsyncGenerator[AsyncSession, None]:
    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)
    async with factory() as session:
        yield session


@pytest_asyncio.fixture
async def test_client(db_engine):
    """
    HTTPX AsyncClient talking to the FastAPI app through ASGITransport.

    get_db_session is overridden so each request gets a session on the
    temporary database, committed on success exactly like production.

    Usage:
        async def test_health(test_client):
            response = await test_client.get("/health")
            assert response.status_code == 200
    """
    from socialapi.main import app

    factory = async_sessionmaker(db_engine, class_=AsyncSession, expire_on_commit=False)

    async def override_db_session() -> AsyncGenerator[AsyncSession, None]:
        async with factory() as session:
            try:
                yield session
                await session.commit()
            except Exception:
                await session.rollback()
                raise

    app.dependency_overrides[get_db_session] = override_db_session
    transport = ASGITransport(app=app)
    async with AsyncClient(transport=transport, base_url="http://test") as client:
        yield client
    app.dependency_overrides.clear()
