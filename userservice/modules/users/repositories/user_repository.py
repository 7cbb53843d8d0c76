"""
User Repository

Handles all database operations for users table.
"""
from typing import Any, Dict, Optional

from userservice.modules.users.domain.user import User
from userservice.modules.users.repositories.base_repository import SqlRepository


class UserRepository(SqlRepository[User]):
    """Repository for user data access."""

    table = "users"
    columns = ("id", "email", "full_name", "is_active", "created_at", "updated_at")
    mutable_columns = ("email", "full_name", "is_active")

    def to_entity(self, row: Dict[str, Any]) -> User:
        return User.from_dict(row)

    def to_values(self, entity: User) -> Dict[str, Any]:
        values = entity.to_dict()
        values["id"] = str(entity.id)
        return values

    async def get_by_email(self, email: str) -> Optional[User]:
        """Get user by email, ignoring case. Inactive users are included."""
        return await self.fetch_one("LOWER(email) = LOWER(:email)", {"email": email})
