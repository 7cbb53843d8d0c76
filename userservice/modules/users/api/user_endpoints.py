"""
User Management API Endpoints

REST API endpoints for user CRUD operations.
Handlers translate request bodies into users, call the service, and map
the returned Result to a response.
"""
import logging
from typing import Optional
from uuid import UUID

from fastapi import APIRouter, Depends
from pydantic import BaseModel

from userservice.modules.api_results import to_response
from userservice.modules.users.domain.user import User
from userservice.modules.users.services.user_service import UserService

logger = logging.getLogger("userservice.users.api")

router = APIRouter(prefix="/api/v1/users", tags=["users"])


# Request Models
# Field rules (required, max length) are enforced by the service so that
# failures come back as domain errors rather than schema errors.
class CreateUserRequest(BaseModel):
    email: Optional[str] = None
    full_name: Optional[str] = None
    is_active: bool = True

    def to_user(self) -> User:
        return User(
            email=self.email or "",
            full_name=self.full_name or "",
            is_active=self.is_active,
        )


class UpdateUserRequest(CreateUserRequest):
    id: UUID

    def to_user(self) -> User:
        user = super().to_user()
        user.id = self.id
        return user


# Service instance
_user_service: Optional[UserService] = None


def get_user_service() -> UserService:
    """FastAPI dependency providing the user service."""
    global _user_service
    if _user_service is None:
        _user_service = UserService()
    return _user_service


@router.get("")
async def list_users(service: UserService = Depends(get_user_service)):
    """List all users, including inactive ones."""
    logger.debug("[user_endpoints.list_users]")
    return to_response(await service.list_users())


@router.get("/{user_id}")
async def get_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    """Get user details by ID."""
    logger.debug(f"[user_endpoints.get_user] user_id={user_id}")
    return to_response(await service.get_user(user_id))


@router.post("")
async def create_user(request: CreateUserRequest, service: UserService = Depends(get_user_service)):
    """
    Create a new user.

    The id is generated by the server and the user always starts active.
    """
    logger.debug(f"[user_endpoints.create_user] email={request.email}")
    return to_response(await service.create_user(request.to_user()))


@router.put("")
async def update_user(request: UpdateUserRequest, service: UserService = Depends(get_user_service)):
    """Update an existing user. The id travels in the body."""
    logger.debug(f"[user_endpoints.update_user] user_id={request.id}")
    return to_response(await service.update_user(request.to_user()))


@router.delete("/{user_id}")
async def delete_user(user_id: UUID, service: UserService = Depends(get_user_service)):
    """Delete user (soft delete - sets is_active=false)."""
    logger.debug(f"[user_endpoints.delete_user] user_id={user_id}")
    return to_response(await service.delete_user(user_id))
