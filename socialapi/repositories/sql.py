"""
Social API: SQLAlchemy Repository Support
===========================================

What:  Session holder and error translation shared by the SQL repositories.
How:   Every statement runs inside `storage_errors()`, which rolls the session
       back on a fault and re-raises it as StorageError with the driver
       exception chained as the cause.
"""

import logging
from contextlib import asynccontextmanager
from typing import Any, AsyncIterator

from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from socialapi.exceptions import DuplicateEntityError, SocialAPIError, StorageError

logger = logging.getLogger(__name__)

# PostgreSQL SQLSTATE for unique_violation
UNIQUE_VIOLATION = "23505"


def _is_unique_violation(exc: IntegrityError) -> bool:
    orig = exc.orig
    sqlstate = getattr(orig, "sqlstate", None) or getattr(orig, "pgcode", None)
    if sqlstate is not None:
        return sqlstate == UNIQUE_VIOLATION
    # SQLite carries no SQLSTATE: "UNIQUE constraint failed: account.username"
    return "unique" in str(orig).lower()


class SessionRepository:
    """Base for repositories bound to one request-scoped AsyncSession."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def _rollback_quietly(self, operation: str) -> None:
        """Roll back after a fault; a dead connection may refuse even that."""
        try:
            await self.session.rollback()
        except Exception as e:
            logger.error("Rollback after %s failed: %r", operation, e)

    @asynccontextmanager
    async def storage_errors(self, operation: str, **context: Any) -> AsyncIterator[None]:
        """
        Translate any fault raised in the block into StorageError.

        Covers SQLAlchemy errors as well as raw driver and socket errors
        (asyncpg raises ConnectionRefusedError on connect, sqlite3 raises
        OverflowError for out-of-range integers). Application errors pass
        through unchanged.

        Args:
            operation: Short description used in the error message
                       (e.g. "inserting a message")
            context:   Identifiers logged with the failure
        """
        try:
            yield
        except SocialAPIError:
            raise
        except Exception as e:
            # Leave the session usable so the request can still commit/close
            await self._rollback_quietly(operation)
            logger.error(
                "Storage error while %s: %s | Context: %s",
                operation,
                str(e.orig) if isinstance(e, IntegrityError) else repr(e),
                context,
            )
            if isinstance(e, IntegrityError) and _is_unique_violation(e):
                raise DuplicateEntityError(
                    message=f"Duplicate entity while {operation}",
                    cause=e,
                    context=context,
                ) from e
            raise StorageError(
                message=f"Error while {operation}",
                cause=e,
                context=context,
            ) from e
