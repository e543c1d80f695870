"""
Social API: Service Results
=============================

What:  The value returned by every AccountService and MessageService call.
How:   A Result holds either a value or a Failure. A Failure names one of
       three kinds and carries a human-readable reason plus, for storage
       faults, the original exception.
Who:   Produced by services; inspected by route handlers, which map each
       failure kind to the status code of their endpoint.

Failure kinds:
    SERVICE_FAILURE  the persistence layer raised StorageError
    INVALID_REQUEST  input content or identity check rejected the call
    NOT_FOUND        entity absent, or a mutation affected zero rows
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class FailureKind(str, Enum):
    SERVICE_FAILURE = "service_failure"
    INVALID_REQUEST = "invalid_request"
    NOT_FOUND = "not_found"


@dataclass(frozen=True)
class Failure:
    kind: FailureKind
    reason: str
    cause: Optional[BaseException] = None


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Success-or-failure outcome of a service call.

    Example:
        result = await message_service.get_by_id(7)
        if result.ok:
            return result.value
        if result.failure.kind is FailureKind.NOT_FOUND:
            ...
    """

    value: Optional[T] = None
    failure: Optional[Failure] = None

    @property
    def ok(self) -> bool:
        return self.failure is None

    @property
    def kind(self) -> Optional[FailureKind]:
        return self.failure.kind if self.failure else None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def invalid(cls, reason: str) -> "Result[T]":
        return cls(failure=Failure(FailureKind.INVALID_REQUEST, reason))

    @classmethod
    def not_found(cls, reason: str) -> "Result[T]":
        return cls(failure=Failure(FailureKind.NOT_FOUND, reason))

    @classmethod
    def service_failure(cls, reason: str, cause: BaseException) -> "Result[T]":
        return cls(failure=Failure(FailureKind.SERVICE_FAILURE, reason, cause))
