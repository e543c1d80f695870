"""
Social API: Repository Interfaces
===================================

What:  Abstract base classes defining the persistence contract for each entity.
How:   Concrete implementations inherit from these and implement every method.
       Services receive an implementation through their constructor, so the
       SQLAlchemy repositories and the in-memory fakes used by the test suite
       are interchangeable.
Who:   Implemented by AccountRepository and MessageRepository; consumed by
       AccountService and MessageService.

Contract (every implementation):
    - Each method issues exactly one statement against the store
    - insert() returns the entity with its store-assigned id
    - update() / delete() return True when at least one row was affected
    - Any store fault is raised as StorageError (never a driver exception)
"""

from abc import ABC, abstractmethod
from typing import Generic, List, Optional, TypeVar

from socialapi.schemas.account import Account
from socialapi.schemas.message import Message

T = TypeVar("T")


class BaseRepository(ABC, Generic[T]):
    """Operations shared by every entity repository."""

    @abstractmethod
    async def get_by_id(self, entity_id: int) -> Optional[T]:
        """Return the entity with this id, or None when absent."""
        ...

    @abstractmethod
    async def get_all(self) -> List[T]:
        ...

    @abstractmethod
    async def insert(self, entity: T) -> T:
        """
        Persist a new entity.

        The incoming id is ignored. Returns a copy carrying the id the store
        assigned.

        Raises:
            DuplicateEntityError: a unique constraint rejected the row
            StorageError: any other store fault
        """
        ...

    @abstractmethod
    async def update(self, entity: T) -> bool:
        ...

    @abstractmethod
    async def delete(self, entity: T) -> bool:
        ...


class AccountRepositoryBase(BaseRepository[Account]):
    """Account persistence, plus the lookups used by registration and login."""

    @abstractmethod
    async def find_by_username(self, username: str) -> Optional[Account]:
        ...

    @abstractmethod
    async def username_exists(self, username: str) -> bool:
        ...

    @abstractmethod
    async def find_by_credentials(self, username: str, password: str) -> Optional[Account]:
        """
        Return the account whose username and password both match exactly.

        Passwords are stored and compared as plain text.
        """
        ...


class MessageRepositoryBase(BaseRepository[Message]):
    """Message persistence, plus listing by author."""

    @abstractmethod
    async def get_by_posted_by(self, account_id: int) -> List[Message]:
        ...
