"""
Result Model

Explicit success/failure return values for service operations.
"""
from dataclasses import dataclass
from typing import Generic, Optional, TypeVar

from userservice.core.errors import Error

T = TypeVar("T")


@dataclass(frozen=True)
class Result(Generic[T]):
    """
    Outcome of an operation: either a success, optionally carrying a value,
    or a failure carrying exactly one error.
    """
    is_success: bool
    value: Optional[T] = None
    error: Optional[Error] = None

    def __post_init__(self):
        if self.is_success and self.error is not None:
            raise ValueError("A successful result cannot carry an error")
        if not self.is_success and self.error is None:
            raise ValueError("A failed result must carry an error")

    @property
    def is_failure(self) -> bool:
        return not self.is_success

    @classmethod
    def success(cls, value: Optional[T] = None) -> "Result[T]":
        return cls(is_success=True, value=value)

    @classmethod
    def failure(cls, error: Error) -> "Result[T]":
        return cls(is_success=False, error=error)
