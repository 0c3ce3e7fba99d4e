"""
Operation Results

Success/failure wrapper returned by every query operation in place of
raising on collaborator failures.
"""

from dataclasses import dataclass
from typing import Generic, TypeVar

from .errors import ExplorerError


T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of a query operation

    Exactly one of ``value`` (on success) or ``error`` (on failure) is
    meaningful. Check ``ok`` before reading ``value``.
    """

    value: T | None = None
    error: ExplorerError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @classmethod
    def success(cls, value: T) -> "Result[T]":
        return cls(value=value)

    @classmethod
    def failure(cls, error: ExplorerError) -> "Result[T]":
        return cls(error=error)

    def unwrap(self) -> T:
        """Return the value, or raise the carried error"""
        if self.error is not None:
            raise self.error
        return self.value
