"""
Business Logic Services

Services contain business logic and orchestrate repository calls.
"""

from .user_service import UserService, validate_user_fields

__all__ = [
    "UserService",
    "validate_user_fields",
]
