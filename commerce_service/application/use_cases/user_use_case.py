"""
Use case for user management.

Orchestrates the user repository and the user aggregate. Structural
validation happens in the entity; this layer adds email uniqueness and
password hashing.
"""

import logging
from typing import Callable, List

from ...core.errors import UserNotFoundError, EmailExistsError
from ...domain.user.entities import User
from ...domain.user.repositories import UserRepository
from ...utils.crypto import hash_password

logger = logging.getLogger("commerce-service.use_cases.users")


class UserUseCase:
    """
    Business operations on users.

    Dependencies:
        - UserRepository: user persistence
        - password_hasher: turns a validated plain password into its stored form

    Example:
        >>> use_case = UserUseCase(user_repository)
        >>> user = await use_case.create_user("john@example.com", "John", "s3cret-pass")
        >>> user.id is not None
        True
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_hasher: Callable[[str], str] = hash_password
    ):
        self._user_repository = user_repository
        self._hash_password = password_hasher

    async def create_user(self, email: str, name: str, password: str) -> User:
        """
        Create a new user with a unique email.

        Raises:
            EmailExistsError: If a live user already has this email
            InvalidEmailError, InvalidNameError, InvalidPasswordError:
                If a required field is empty
        """
        user = User.create(email=email, name=name, password=password)

        await self._ensure_email_available(email)
        user.password = self._hash_password(password)

        await self._user_repository.create(user)
        logger.info(f"User created: {user.id} ({user.email})")
        return user

    async def get_user(self, user_id: int) -> User:
        """
        Raises:
            UserNotFoundError: If the user does not exist or is deleted
        """
        return await self._user_repository.get_by_id(user_id)

    async def get_users(self, limit: int, offset: int) -> List[User]:
        return await self._user_repository.get_all(limit, offset)

    async def update_user(self, user_id: int, email: str = "", name: str = "") -> User:
        """
        Update name and/or email; empty values leave fields unchanged.

        Raises:
            UserNotFoundError: If the user does not exist or is deleted
            EmailExistsError: If the new email belongs to another user
        """
        user = await self._user_repository.get_by_id(user_id)

        user.update_info(name=name, email=email)

        await self._user_repository.update(user)
        logger.info(f"User updated: {user.id}")
        return user

    async def change_password(self, user_id: int, new_password: str) -> User:
        """
        Raises:
            UserNotFoundError: If the user does not exist or is deleted
            InvalidPasswordError: If new_password is empty
        """
        user = await self._user_repository.get_by_id(user_id)

        user.change_password(new_password)
        user.password = self._hash_password(new_password)

        await self._user_repository.update(user)
        logger.info(f"Password changed for user {user.id}")
        return user

    async def delete_user(self, user_id: int) -> None:
        """
        Soft delete a user.

        Raises:
            UserNotFoundError: If the user does not exist or is already deleted
        """
        await self._user_repository.delete(user_id)
        logger.info(f"User deleted: {user_id}")

    async def restore_user(self, user_id: int) -> User:
        """
        Reactivate a soft-deleted user.

        Raises:
            UserNotFoundError: If the user never existed
            EmailExistsError: If the email was taken while the user was deleted
        """
        user = await self._user_repository.get_by_id(user_id, include_deleted=True)

        user.activate()

        await self._user_repository.update(user)
        logger.info(f"User restored: {user.id}")
        return user

    async def get_users_by_email_domain(self, domain: str) -> List[User]:
        return await self._user_repository.get_users_by_email_domain(domain)

    async def get_active_users(self) -> List[User]:
        return await self._user_repository.get_active_users()

    async def search_users(
        self,
        limit: int,
        offset: int,
        email: str = "",
        name: str = ""
    ) -> List[User]:
        return await self._user_repository.get_users_with_filters(
            limit=limit,
            offset=offset,
            email=email,
            name=name
        )

    async def _ensure_email_available(self, email: str) -> None:
        # Only a not-found lookup means the email is free.
        try:
            await self._user_repository.get_by_email(email)
        except UserNotFoundError:
            return
        logger.warning(f"Email already registered: {email}")
        raise EmailExistsError(details={"email": email})
