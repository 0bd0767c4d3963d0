"""
Unit tests for UserUseCase.

The repository is replaced by an AsyncMock.
"""

import pytest
from unittest.mock import AsyncMock

from commerce_service.application.use_cases import UserUseCase
from commerce_service.core.errors import (
    EmailExistsError,
    InvalidEmailError,
    InvalidPasswordError,
    UserNotFoundError,
)
from commerce_service.domain.user import User


def fake_hash(password: str) -> str:
    return f"hashed:{password}"


@pytest.fixture
def user_repository():
    repository = AsyncMock()
    repository.get_by_email.side_effect = UserNotFoundError()

    async def assign_id(user):
        user.id = 1
        return user

    repository.create.side_effect = assign_id
    repository.update.side_effect = lambda user: user
    return repository


@pytest.fixture
def use_case(user_repository):
    return UserUseCase(user_repository, password_hasher=fake_hash)


@pytest.fixture
def stored_user():
    user = User.create(email="john@example.com", name="John", password="hashed:old")
    user.id = 1
    return user


class TestCreateUser:

    @pytest.mark.asyncio
    async def test_create_hashes_password(self, use_case, user_repository):
        user = await use_case.create_user("john@example.com", "John", "s3cret-pass")

        assert user.id == 1
        assert user.password == "hashed:s3cret-pass"
        user_repository.get_by_email.assert_awaited_once_with("john@example.com")
        user_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_create_duplicate_email(self, use_case, user_repository, stored_user):
        user_repository.get_by_email.side_effect = None
        user_repository.get_by_email.return_value = stored_user

        with pytest.raises(EmailExistsError):
            await use_case.create_user("john@example.com", "Other", "s3cret-pass")
        user_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_create_validates_before_lookup(self, use_case, user_repository):
        with pytest.raises(InvalidEmailError):
            await use_case.create_user("", "John", "s3cret-pass")
        user_repository.get_by_email.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_lookup_failure_propagates(self, use_case, user_repository):
        user_repository.get_by_email.side_effect = RuntimeError("db down")

        with pytest.raises(RuntimeError):
            await use_case.create_user("john@example.com", "John", "s3cret-pass")


class TestUpdateUser:

    @pytest.mark.asyncio
    async def test_update_keeps_empty_fields(self, use_case, user_repository, stored_user):
        user_repository.get_by_id.return_value = stored_user

        user = await use_case.update_user(1, email="", name="Johnny")

        assert user.name == "Johnny"
        assert user.email == "john@example.com"
        user_repository.update.assert_awaited_once_with(stored_user)

    @pytest.mark.asyncio
    async def test_update_missing_user(self, use_case, user_repository):
        user_repository.get_by_id.side_effect = UserNotFoundError()

        with pytest.raises(UserNotFoundError):
            await use_case.update_user(99, name="Ghost")
        user_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_change_password(self, use_case, user_repository, stored_user):
        user_repository.get_by_id.return_value = stored_user

        user = await use_case.change_password(1, "new-pass-123")

        assert user.password == "hashed:new-pass-123"

    @pytest.mark.asyncio
    async def test_change_password_empty(self, use_case, user_repository, stored_user):
        user_repository.get_by_id.return_value = stored_user

        with pytest.raises(InvalidPasswordError):
            await use_case.change_password(1, "")
        user_repository.update.assert_not_awaited()


class TestDeleteAndRestore:

    @pytest.mark.asyncio
    async def test_delete_delegates(self, use_case, user_repository):
        await use_case.delete_user(1)
        user_repository.delete.assert_awaited_once_with(1)

    @pytest.mark.asyncio
    async def test_restore_loads_deleted_user(self, use_case, user_repository, stored_user):
        stored_user.mark_as_deleted()
        user_repository.get_by_id.return_value = stored_user

        user = await use_case.restore_user(1)

        assert not user.is_deleted()
        user_repository.get_by_id.assert_awaited_once_with(1, include_deleted=True)
        user_repository.update.assert_awaited_once_with(stored_user)


class TestUserQueries:

    @pytest.mark.asyncio
    async def test_search_passes_filters(self, use_case, user_repository):
        user_repository.get_users_with_filters.return_value = []

        await use_case.search_users(limit=5, offset=10, email="example", name="Jo")

        user_repository.get_users_with_filters.assert_awaited_once_with(
            limit=5, offset=10, email="example", name="Jo"
        )

    @pytest.mark.asyncio
    async def test_domain_lookup(self, use_case, user_repository, stored_user):
        user_repository.get_users_by_email_domain.return_value = [stored_user]

        users = await use_case.get_users_by_email_domain("example.com")

        assert users == [stored_user]
