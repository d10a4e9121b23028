"""
Tagged results returned by the service layer.

Services never raise for expected failures; they return a ``Result`` carrying
either a value or a ``ServiceError``. Routers are the only place that turns an
``ErrorKind`` into an HTTP status.
"""
from dataclasses import dataclass
from enum import Enum
from typing import Generic, Optional, TypeVar

T = TypeVar("T")


class ErrorKind(str, Enum):
    """Failure categories a service operation can report."""
    INVALID_INPUT = "invalid_input"
    NOT_FOUND = "not_found"
    DUPLICATE_KEY = "duplicate_key"
    INTERNAL_FAILURE = "internal_failure"
    UPSTREAM_FAILURE = "upstream_failure"


@dataclass(frozen=True)
class ServiceError:
    """A failed operation: what went wrong and a caller-safe message."""
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    """Either a value or an error, never both."""
    value: Optional[T] = None
    error: Optional[ServiceError] = None

    @property
    def is_ok(self) -> bool:
        return self.error is None

    @classmethod
    def ok(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def fail(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=ServiceError(kind=kind, message=message))
