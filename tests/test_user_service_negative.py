"""
Negative test cases for UserService.
Verifies validation, conflict, not-found, and fault handling.
"""
from uuid import uuid4

import pytest

from userservice.core.errors import EntityErrors, ErrorType
from userservice.modules.users.domain.errors import UserErrors
from userservice.modules.users.domain.user import User


@pytest.mark.asyncio
@pytest.mark.parametrize("email", ["", "   ", None])
async def test_create_fails_when_email_missing(service, repository, email):
    result = await service.create_user(User(email=email, full_name="John Doe"))

    assert result.is_failure
    assert result.error == UserErrors.MISSING_EMAIL
    repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_fails_when_email_too_long(service, repository):
    user = User(email="a" * 201, full_name="John Doe")

    result = await service.create_user(user)

    assert result.error == UserErrors.EMAIL_TOO_LONG
    repository.add.assert_not_awaited()


@pytest.mark.asyncio
@pytest.mark.parametrize("full_name", ["", " \t"])
async def test_create_fails_when_full_name_missing(service, repository, full_name):
    result = await service.create_user(User(email="john@doe.com", full_name=full_name))

    assert result.error == UserErrors.MISSING_FULL_NAME
    repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_fails_when_full_name_too_long(service, repository):
    result = await service.create_user(User(email="john@doe.com", full_name="n" * 201))

    assert result.error == UserErrors.FULL_NAME_TOO_LONG
    repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_validation_stops_at_first_failure(service):
    """Email rules run before full name rules."""
    result = await service.create_user(User(email="", full_name=""))

    assert result.error == UserErrors.MISSING_EMAIL


@pytest.mark.asyncio
async def test_validation_skips_repository(service, repository):
    await service.create_user(User(email="a" * 201, full_name="John Doe"))

    repository.get_by_email.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_fails_when_email_already_exists(service, repository, existing_user):
    repository.get_by_email.return_value = existing_user

    result = await service.create_user(User(email="john@doe.com", full_name="Someone Else"))

    assert result.error == UserErrors.EMAIL_CONFLICT
    assert result.error.type == ErrorType.CONFLICT
    repository.add.assert_not_awaited()


@pytest.mark.asyncio
async def test_create_conflicts_with_inactive_user(service, repository, existing_user):
    existing_user.is_active = False
    repository.get_by_email.return_value = existing_user

    result = await service.create_user(User(email="john@doe.com", full_name="John Doe"))

    assert result.error == UserErrors.EMAIL_CONFLICT


@pytest.mark.asyncio
async def test_create_fault_becomes_unexpected(service, repository):
    repository.add.side_effect = RuntimeError("unique constraint failed")

    result = await service.create_user(User(email="john@doe.com", full_name="John Doe"))

    assert result.error == EntityErrors.unexpected("User")
    assert "unique constraint" not in result.error.message


@pytest.mark.asyncio
async def test_update_fails_when_user_not_found(service, repository):
    user_id = uuid4()

    result = await service.update_user(User(id=user_id, email="john@doe.com", full_name="John Doe"))

    assert result.error == EntityErrors.not_found("User", user_id)
    repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_fails_validation_before_lookup(service, repository):
    result = await service.update_user(User(id=uuid4(), email="john@doe.com", full_name=""))

    assert result.error == UserErrors.MISSING_FULL_NAME
    repository.get_by_id.assert_not_awaited()
    repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_fails_when_email_owned_by_other_user(service, repository, existing_user):
    other = User(id=uuid4(), email="jane@doe.com", full_name="Jane Doe")
    repository.get_by_id.return_value = existing_user
    repository.get_by_email.return_value = other

    result = await service.update_user(
        User(id=existing_user.id, email="jane@doe.com", full_name="John Doe")
    )

    assert result.error == UserErrors.EMAIL_CONFLICT
    repository.update.assert_not_awaited()


@pytest.mark.asyncio
async def test_update_fault_becomes_unexpected(service, repository, existing_user):
    repository.get_by_id.return_value = existing_user
    repository.update.side_effect = RuntimeError("deadlock detected")

    result = await service.update_user(
        User(id=existing_user.id, email="john@doe.com", full_name="John Doe")
    )

    assert result.error == EntityErrors.unexpected("User")


@pytest.mark.asyncio
async def test_get_user_not_found(service):
    result = await service.get_user(uuid4())

    assert result.error.type == ErrorType.NOT_FOUND


@pytest.mark.asyncio
async def test_delete_user_not_found(service, repository):
    result = await service.delete_user(uuid4())

    assert result.error.type == ErrorType.NOT_FOUND
    repository.delete.assert_not_awaited()
