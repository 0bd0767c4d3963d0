"""
UserRepository interface.

Storage-agnostic contract for user persistence, implemented by the
infrastructure layer.
"""

from abc import abstractmethod
from typing import List

from commerce_service.domain.shared.repository import Repository
from commerce_service.domain.user.entities import User


class UserRepository(Repository[User]):
    """
    Repository for the user aggregate.

    Not-found lookups raise UserNotFoundError; a duplicate email on create
    or update raises EmailExistsError.
    """

    @abstractmethod
    async def get_by_id(self, id: int, include_deleted: bool = False) -> User:
        """
        Get a user by id.

        Args:
            id: User id
            include_deleted: Also return a soft-deleted user (restore path)

        Raises:
            UserNotFoundError: If no matching user exists
        """
        pass

    @abstractmethod
    async def get_by_email(self, email: str) -> User:
        """
        Get a user by email.

        Raises:
            UserNotFoundError: If no live user has this email
        """
        pass

    @abstractmethod
    async def count_deleted(self) -> int:
        """Count soft-deleted users."""
        pass

    @abstractmethod
    async def get_users_by_email_domain(self, domain: str) -> List[User]:
        """List live users whose email ends with the given domain."""
        pass

    @abstractmethod
    async def get_active_users(self) -> List[User]:
        """List all users that are not soft deleted."""
        pass

    @abstractmethod
    async def get_users_with_filters(
        self,
        limit: int,
        offset: int,
        email: str = "",
        name: str = ""
    ) -> List[User]:
        """
        List live users matching optional substring filters.

        Args:
            limit: Maximum number of users to return
            offset: Number of users to skip
            email: Substring of the email, ignored when empty
            name: Substring of the name, ignored when empty
        """
        pass
