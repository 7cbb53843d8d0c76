"""
User Service

Business logic for user management operations: field validation, email
uniqueness, and create/update orchestration. Reads and deletes go through
the shared CRUD helper.
"""
import logging
from typing import List, Optional
from uuid import UUID, uuid4

from userservice.core.crud_service import CrudService
from userservice.core.errors import EntityErrors, Error
from userservice.core.result import Result
from userservice.modules.users.domain.errors import UserErrors
from userservice.modules.users.domain.user import MAX_FIELD_LENGTH, User
from userservice.modules.users.repositories.user_repository import UserRepository

logger = logging.getLogger("userservice.users.service")


def validate_user_fields(user: User) -> Optional[Error]:
    """Check email and full name in fixed order; return the first failure."""
    email = user.email or ""
    full_name = user.full_name or ""

    if not email.strip():
        return UserErrors.MISSING_EMAIL
    if len(email) > MAX_FIELD_LENGTH:
        return UserErrors.EMAIL_TOO_LONG
    if not full_name.strip():
        return UserErrors.MISSING_FULL_NAME
    if len(full_name) > MAX_FIELD_LENGTH:
        return UserErrors.FULL_NAME_TOO_LONG
    return None


class UserService:
    """Service for user business logic."""

    def __init__(self, repository: Optional[UserRepository] = None):
        self.repository = repository or UserRepository()
        self.crud = CrudService(User, self.repository, logger)

    async def create_user(self, user: User) -> Result[User]:
        """Create a new user account."""
        logger.debug(f"[UserService.create_user] email={user.email}")

        error = validate_user_fields(user)
        if error:
            return Result.failure(error)

        async def create() -> Result[User]:
            if await self.repository.get_by_email(user.email) is not None:
                logger.info(f"[UserService.create_user] Email already registered: {user.email}")
                return Result.failure(UserErrors.EMAIL_CONFLICT)

            user.id = uuid4()
            user.is_active = True

            await self.repository.add(user)
            logger.info(f"[UserService.create_user] Created user id={user.id}")
            return Result.success(user)

        return await self.crud.guard("UserService.create_user", create)

    async def update_user(self, user: User) -> Result[User]:
        """
        Update an existing user.

        Only email, full name and active flag are taken from the payload;
        the returned user is the stored record after the changes.
        """
        logger.debug(f"[UserService.update_user] user_id={user.id}")

        error = validate_user_fields(user)
        if error:
            return Result.failure(error)

        async def update() -> Result[User]:
            existing = await self.repository.get_by_id(user.id)
            if existing is None:
                return Result.failure(EntityErrors.not_found(self.crud.entity_name, user.id))

            email_owner = await self.repository.get_by_email(user.email)
            if email_owner is not None and email_owner.id != user.id:
                logger.info(f"[UserService.update_user] Email already registered: {user.email}")
                return Result.failure(UserErrors.EMAIL_CONFLICT)

            existing.email = user.email
            existing.full_name = user.full_name
            existing.is_active = user.is_active

            await self.repository.update(existing)
            logger.info(f"[UserService.update_user] Updated user id={existing.id}")
            return Result.success(existing)

        return await self.crud.guard("UserService.update_user", update, user.id)

    async def get_user(self, user_id: UUID) -> Result[User]:
        """Get user by ID."""
        logger.debug(f"[UserService.get_user] user_id={user_id}")
        return await self.crud.get_by_id(user_id)

    async def list_users(self) -> Result[List[User]]:
        """List all users, active and inactive."""
        return await self.crud.get_all()

    async def delete_user(self, user_id: UUID) -> Result[None]:
        """Soft delete user (set is_active = false)."""
        logger.debug(f"[UserService.delete_user] user_id={user_id}")
        return await self.crud.delete(user_id)
