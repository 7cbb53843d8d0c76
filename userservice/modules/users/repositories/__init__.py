"""
Data Access Layer (Repositories)

Repositories handle all database interactions.
"""

from .base_repository import SqlRepository
from .user_repository import UserRepository

__all__ = [
    "SqlRepository",
    "UserRepository",
]
