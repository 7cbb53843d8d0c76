"""
Error Model

Immutable, uniquely coded descriptions of operation failures and the
registry that collects every statically defined error.
"""
from dataclasses import dataclass, field
from enum import Enum
from typing import Any, List, Tuple


class ErrorType(Enum):
    """Logical error categories, mapped to HTTP status codes at the API edge."""
    NONE = "none"
    VALIDATION = "validation"
    NOT_FOUND = "not_found"
    CONFLICT = "conflict"
    UNAUTHORIZED = "unauthorized"
    FORBIDDEN = "forbidden"
    UNEXPECTED = "unexpected"


@dataclass(frozen=True)
class Error:
    """
    A failure value identified by its code.

    Two errors are equal when their codes match; message and type do not
    take part in comparison or hashing.
    """
    code: str
    message: str = field(compare=False)
    type: ErrorType = field(compare=False, default=ErrorType.UNEXPECTED)

    def __str__(self) -> str:
        return f"{self.code}: {self.message}"


# Every error built through define(), in definition order.
_catalog: List[Error] = []


def define(code: str, message: str, error_type: ErrorType) -> Error:
    """Create a static error and record it in the catalog."""
    error = Error(code=code, message=message, type=error_type)
    _catalog.append(error)
    return error


def catalog() -> Tuple[Error, ...]:
    """Return all statically defined errors."""
    return tuple(_catalog)


class EntityErrors:
    """Errors shared by every entity type. Built per call since the entity and id vary."""

    @staticmethod
    def not_found(entity_name: str, entity_id: Any) -> Error:
        return Error(
            code=f"{entity_name}.NotFound",
            message=f"{entity_name} with id '{entity_id}' was not found.",
            type=ErrorType.NOT_FOUND,
        )

    @staticmethod
    def unexpected(entity_name: str) -> Error:
        return Error(
            code=f"{entity_name}.Unexpected",
            message=f"An unexpected error occurred while processing {entity_name}.",
            type=ErrorType.UNEXPECTED,
        )
