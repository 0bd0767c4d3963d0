"""
User queries: single user, paginated list and statistics.
"""

from typing import List

from pydantic import Field

from .base import Query, QueryHandler, normalize_pagination
from ..dto.user_dto import UserDTO, UserStatsResult
from ...core.errors import InvalidUserIDError
from ...domain.user.repositories import UserRepository


class GetUserQuery(Query):
    """Fetch one live user by id."""

    user_id: int = Field(description="User id")


class GetUserHandler(QueryHandler[UserDTO]):
    """
    Handler for GetUserQuery.

    Example:
        >>> handler = GetUserHandler(user_repository)
        >>> dto = await handler.handle(GetUserQuery(user_id=1))
    """

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def handle(self, query: GetUserQuery) -> UserDTO:
        """
        Raises:
            InvalidUserIDError: If user_id is not positive
            UserNotFoundError: If the user does not exist or is deleted
        """
        if query.user_id <= 0:
            raise InvalidUserIDError(details={"user_id": query.user_id})

        user = await self._user_repository.get_by_id(query.user_id)
        return UserDTO.from_entity(user)


class GetUsersQuery(Query):
    """
    Paginated list of live users.

    Out-of-range values are normalised by the handler, not rejected.
    """

    limit: int = Field(default=0, description="Page size; 0 or less means default")
    offset: int = Field(default=0, description="Number of users to skip")


class GetUsersHandler(QueryHandler[List[UserDTO]]):
    """
    Handler for GetUsersQuery.

    Attributes:
        _default_page_size: Used when limit is 0 or negative
        _max_page_size: Upper bound for limit
    """

    def __init__(
        self,
        user_repository: UserRepository,
        default_page_size: int = 10,
        max_page_size: int = 100
    ):
        self._user_repository = user_repository
        self._default_page_size = default_page_size
        self._max_page_size = max_page_size

    async def handle(self, query: GetUsersQuery) -> List[UserDTO]:
        limit, offset = normalize_pagination(
            query.limit,
            query.offset,
            self._default_page_size,
            self._max_page_size
        )
        users = await self._user_repository.get_all(limit, offset)
        return [UserDTO.from_entity(user) for user in users]


class GetUserStatsQuery(Query):
    """User counters."""


class GetUserStatsHandler(QueryHandler[UserStatsResult]):

    def __init__(self, user_repository: UserRepository):
        self._user_repository = user_repository

    async def handle(self, query: GetUserStatsQuery) -> UserStatsResult:
        active_users = await self._user_repository.count()
        deleted_users = await self._user_repository.count_deleted()
        return UserStatsResult(
            total_users=active_users + deleted_users,
            active_users=active_users,
            deleted_users=deleted_users
        )
