"""
Base classes for queries.

A query reads data and never changes system state.
"""

from abc import ABC, abstractmethod
from typing import Generic, Tuple, TypeVar

from pydantic import BaseModel, ConfigDict


TResult = TypeVar('TResult')


class Query(BaseModel, ABC):
    """
    Base class for queries.

    Example:
        >>> class GetOrderQuery(Query):
        ...     order_id: int
        >>> query = GetOrderQuery(order_id=1)
    """

    model_config = ConfigDict(frozen=True)


class QueryHandler(ABC, Generic[TResult]):
    """
    Base class for query handlers.

    Handlers load data from repositories and convert it to DTOs.
    """

    @abstractmethod
    async def handle(self, query: Query) -> TResult:
        """
        Execute the query.

        Raises:
            DomainError: If the requested data does not exist
            InfrastructureError: If persistence fails
        """
        pass


def normalize_pagination(
    limit: int,
    offset: int,
    default_page_size: int,
    max_page_size: int
) -> Tuple[int, int]:
    """
    Clamp pagination into the allowed window.

    A non-positive limit falls back to the default page size, a limit above
    the maximum is capped, a negative offset becomes 0.
    """
    if limit <= 0:
        limit = default_page_size
    return min(limit, max_page_size), max(offset, 0)
