"""
Queries of the application layer.
"""

from .base import Query, QueryHandler, normalize_pagination
from .get_user import (
    GetUserQuery,
    GetUserHandler,
    GetUsersQuery,
    GetUsersHandler,
    GetUserStatsQuery,
    GetUserStatsHandler,
)

__all__ = [
    "Query",
    "QueryHandler",
    "normalize_pagination",
    "GetUserQuery",
    "GetUserHandler",
    "GetUsersQuery",
    "GetUsersHandler",
    "GetUserStatsQuery",
    "GetUserStatsHandler",
]
