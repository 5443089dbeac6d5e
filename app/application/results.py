"""
Explicit result objects returned by use cases.

A use case that can fail in an expected way returns ``Result``: either a value
or an ``OperationError`` carrying one enumerated error kind. Callers branch on
``result.ok`` and map ``result.error.kind`` to a response.
"""
# Standard library imports
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar, Union

# Local application imports
from ..domain.exceptions import (
    AuthErrorKind,
    StoreErrorKind,
    ValidationErrorKind,
    WeatherErrorKind,
)

T = TypeVar("T")

ErrorKind = Union[AuthErrorKind, ValidationErrorKind, WeatherErrorKind, StoreErrorKind]


@dataclass(frozen=True)
class OperationError:
    """One failure: its kind plus the message shown to the user"""
    kind: ErrorKind
    message: str


@dataclass(frozen=True)
class Result(Generic[T]):
    value: Optional[T] = None
    error: Optional[OperationError] = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, kind: ErrorKind, message: str) -> "Result[T]":
        return cls(error=OperationError(kind=kind, message=message))
