"""
Social API: Exception Hierarchy
=================================

What:  Application-specific exceptions raised at the persistence boundary.
How:   Each exception carries a message and an optional context dict.
       The logic layer converts them into Result failures; anything that
       escapes is caught by the global handlers registered in main.py.
Who:   Raised by repositories; caught by services and global handlers.

Exception Hierarchy:
    SocialAPIError (base)
    └── StorageError              → 500 Internal Server Error (if it escapes)
        └── DuplicateEntityError  → unique constraint violated on insert

Validation, authorization and not-found outcomes are not exceptions here;
services return them as values (see socialapi/results.py).
"""

from typing import Any, Dict, Optional


class SocialAPIError(Exception):
    """
    Base exception for all application errors.

    Attributes:
        message:  Human-readable description
        context:  Additional debug info (logged but NOT returned to client)
    """

    def __init__(
        self,
        message: str = "An unexpected error occurred",
        context: Optional[Dict[str, Any]] = None,
    ):
        self.message = message
        self.context = context or {}
        super().__init__(self.message)


class StorageError(SocialAPIError):
    """
    Raised when a persistence operation fails.

    What:    A query, insert, update, or delete failed in the store.
    When:    Connection lost, constraint violation, malformed statement.

    The original driver exception is chained as ``__cause__`` and exposed
    through ``cause``. Its type name is recorded in ``context`` so log lines
    stay readable without the traceback.
    """

    def __init__(
        self,
        message: str = "A storage error occurred",
        cause: Optional[BaseException] = None,
        context: Optional[Dict[str, Any]] = None,
    ):
        ctx = context or {}
        if cause is not None:
            ctx["original_error"] = type(cause).__name__
        super().__init__(message=message, context=ctx)
        self.cause = cause


class DuplicateEntityError(StorageError):
    """
    Raised when an insert violates a unique constraint.

    The only unique key besides the primary keys is ``account.username``, so
    this surfaces the losing side of a concurrent registration race.
    """
