"""
Domain Models

Pure data models and error definitions for the user entity.
"""

from .user import User, MAX_FIELD_LENGTH
from .errors import UserErrors

__all__ = [
    "User",
    "MAX_FIELD_LENGTH",
    "UserErrors",
]
