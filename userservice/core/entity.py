"""
Entity Contracts

Structural types shared by persisted domain entities.
"""
from typing import Protocol, runtime_checkable


@runtime_checkable
class SoftDeletable(Protocol):
    """Entities removed by clearing ``is_active`` instead of deleting the row."""
    is_active: bool
