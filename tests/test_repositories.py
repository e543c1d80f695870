"""
Social API: SQL Repository Tests
==================================

What:  Tests for AccountRepository and MessageRepository against SQLite.
How:   Each test gets a fresh database file (db_session fixture) built from
       the ORM metadata, so the statements run for real through aiosqlite.

What we test:
    ✅ Insert assigns an id; fetched entity equals inserted one except id
    ✅ Credential lookup is an exact match
    ✅ Duplicate username raises DuplicateEntityError, session stays usable
    ✅ Update/delete report whether a row was affected
    ✅ Listing by author returns only that author's messages, in id order
    ✅ Connection and driver faults surface as StorageError, never raw
    ✅ Unique violations recognised by SQLSTATE, or by message on SQLite
"""

import pytest
from unittest.mock import AsyncMock, patch

from sqlalchemy.exc import IntegrityError

from socialapi.exceptions import DuplicateEntityError, StorageError
from socialapi.repositories.account_repository import AccountRepository
from socialapi.repositories.message_repository import MessageRepository
from socialapi.repositories.sql import _is_unique_violation
from socialapi.schemas.account import Account
from socialapi.schemas.message import Message


class TestAccountRepository:

    @pytest.mark.asyncio
    async def test_insert_and_fetch(self, db_session):
        repo = AccountRepository(db_session)

        created = await repo.insert(Account(username="ann", password="pw12"))
        fetched = await repo.get_by_id(created.id)

        assert created.id != 0
        assert fetched == Account(id=created.id, username="ann", password="pw12")
        assert await repo.get_by_id(created.id + 100) is None

    @pytest.mark.asyncio
    async def test_username_queries(self, db_session):
        repo = AccountRepository(db_session)
        created = await repo.insert(Account(username="ann", password="pw12"))

        assert await repo.username_exists("ann") is True
        assert await repo.username_exists("bob") is False
        assert await repo.find_by_username("ann") == created
        assert await repo.find_by_credentials("ann", "pw12") == created
        assert await repo.find_by_credentials("ann", "pw13") is None
        assert await repo.find_by_credentials("Ann", "pw12") is None

    @pytest.mark.asyncio
    async def test_duplicate_username_raises(self, db_session):
        repo = AccountRepository(db_session)
        await repo.insert(Account(username="ann", password="pw12"))
        await db_session.commit()

        with pytest.raises(DuplicateEntityError) as exc_info:
            await repo.insert(Account(username="ann", password="other"))

        assert exc_info.value.context["original_error"] == "IntegrityError"
        # The failed insert was rolled back; the session still answers queries
        accounts = await repo.get_all()
        assert [a.username for a in accounts] == ["ann"]

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db_session):
        repo = AccountRepository(db_session)
        created = await repo.insert(Account(username="ann", password="pw12"))

        assert await repo.update(created.model_copy(update={"password": "newpw"})) is True
        assert (await repo.get_by_id(created.id)).password == "newpw"
        assert await repo.update(Account(id=999, password="x")) is False

        assert await repo.delete(created) is True
        assert await repo.delete(created) is False
        assert await repo.get_all() == []


class TestMessageRepository:

    @pytest.mark.asyncio
    async def test_round_trip_preserves_fields(self, db_session):
        repo = MessageRepository(db_session)
        message = Message(posted_by=1, message_text="hello", time_posted_epoch=1669947792)

        created = await repo.insert(message)
        fetched = await repo.get_by_id(created.id)

        assert created.id != 0
        assert fetched == message.model_copy(update={"id": created.id})

    @pytest.mark.asyncio
    async def test_get_by_posted_by(self, db_session):
        repo = MessageRepository(db_session)
        first = await repo.insert(Message(posted_by=1, message_text="one", time_posted_epoch=1))
        await repo.insert(Message(posted_by=2, message_text="two", time_posted_epoch=2))
        third = await repo.insert(Message(posted_by=1, message_text="three", time_posted_epoch=3))

        assert await repo.get_by_posted_by(1) == [first, third]
        assert await repo.get_by_posted_by(3) == []
        assert len(await repo.get_all()) == 3

    @pytest.mark.asyncio
    async def test_update_and_delete(self, db_session):
        repo = MessageRepository(db_session)
        created = await repo.insert(Message(posted_by=1, message_text="before", time_posted_epoch=1))

        edited = created.model_copy(update={"message_text": "after"})
        assert await repo.update(edited) is True
        assert await repo.get_by_id(created.id) == edited

        assert await repo.delete(created) is True
        assert await repo.delete(created) is False
        assert await repo.update(edited) is False
        assert await repo.get_by_id(created.id) is None


class DriverError(Exception):
    """Stand-in for a DBAPI exception, optionally carrying a SQLSTATE."""

    def __init__(self, message, sqlstate=None):
        super().__init__(message)
        self.sqlstate = sqlstate


class TestStorageFaultTranslation:
    """Faults below SQLAlchemy's own exception types still become StorageError."""

    @pytest.mark.asyncio
    async def test_refused_connection_becomes_storage_error(self, db_session):
        repo = AccountRepository(db_session)
        refused = ConnectionRefusedError(111, "Connect call failed ('127.0.0.1', 1)")

        with patch.object(db_session, "execute", AsyncMock(side_effect=refused)):
            with pytest.raises(StorageError) as exc_info:
                await repo.get_by_id(1)

        assert exc_info.value.cause is refused
        assert exc_info.value.__cause__ is refused
        assert exc_info.value.context["original_error"] == "ConnectionRefusedError"
        assert not isinstance(exc_info.value, DuplicateEntityError)

    @pytest.mark.asyncio
    async def test_failed_rollback_does_not_mask_storage_error(self, db_session):
        repo = MessageRepository(db_session)
        refused = ConnectionRefusedError(111, "Connect call failed")

        with patch.object(db_session, "execute", AsyncMock(side_effect=refused)), \
             patch.object(db_session, "rollback", AsyncMock(side_effect=OSError("broken pipe"))):
            with pytest.raises(StorageError) as exc_info:
                await repo.get_all()

        assert exc_info.value.cause is refused

    @pytest.mark.asyncio
    async def test_out_of_range_id_becomes_storage_error(self, db_session):
        repo = MessageRepository(db_session)

        with pytest.raises(StorageError):
            await repo.get_by_id(10 ** 20)

        # The session was rolled back and still answers queries
        assert await repo.get_all() == []

    @pytest.mark.parametrize("orig,expected", [
        (DriverError("duplicate key value violates constraint", sqlstate="23505"), True),
        (DriverError("unique-looking text on a foreign key failure", sqlstate="23503"), False),
        (DriverError("UNIQUE constraint failed: account.username"), True),
        (DriverError("NOT NULL constraint failed: account.password"), False),
    ])
    def test_unique_violation_detection(self, orig, expected):
        error = IntegrityError("INSERT INTO account ...", {}, orig)
        assert _is_unique_violation(error) is expected
