"""
Error taxonomy and explicit result values.

Expected failures (bad id, blank field, missing record, unparsable body)
travel as ``ServiceResult`` values. Anything else is raised and answered
with a 500 by the API catch-all handler.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure classes understood by the error mapper."""

    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    MALFORMED_INPUT = "malformed_input"


@dataclass(frozen=True)
class ServiceError:
    """A classified failure with a client-facing message."""

    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class ServiceResult(Generic[T]):
    """Either a value or a ServiceError."""

    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "ServiceResult[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "ServiceResult[T]":
        return cls(error=ServiceError(kind=kind, message=message))

    @classmethod
    def invalid(cls, message: str) -> "ServiceResult[T]":
        return cls.failure(ErrorKind.VALIDATION, message)

    @classmethod
    def not_found(cls, message: str) -> "ServiceResult[T]":
        return cls.failure(ErrorKind.NOT_FOUND, message)

    @classmethod
    def malformed(cls, message: str) -> "ServiceResult[T]":
        return cls.failure(ErrorKind.MALFORMED_INPUT, message)
