"""
Base Repository interface for the domain layer.

The core depends only on these contracts; any persistence technology that
satisfies them is interchangeable.
"""

from abc import ABC, abstractmethod
from typing import Generic, List, TypeVar

from commerce_service.domain.shared.base_entity import AggregateRoot


TAggregate = TypeVar("TAggregate", bound=AggregateRoot)


class Repository(ABC, Generic[TAggregate]):
    """
    Base interface for aggregate repositories.

    Soft-deleted aggregates are invisible to every standard lookup: they are
    not returned by get_by_id or get_all and are not counted.

    Usage:
        class UserRepository(Repository[User]):
            async def get_by_email(self, email: str) -> User:
                ...
    """

    @abstractmethod
    async def create(self, entity: TAggregate) -> TAggregate:
        """
        Persist a new aggregate.

        Assigns ids to the aggregate (and to any owned children) in place.

        Args:
            entity: Aggregate to persist

        Returns:
            The same aggregate with its id assigned
        """
        pass

    @abstractmethod
    async def get_by_id(self, id: int) -> TAggregate:
        """
        Get an aggregate by id.

        Raises:
            DomainError: The aggregate's not-found error if it does not exist
                or is soft deleted
        """
        pass

    @abstractmethod
    async def get_all(self, limit: int, offset: int) -> List[TAggregate]:
        """
        List aggregates ordered by id.

        Args:
            limit: Maximum number of aggregates to return
            offset: Number of aggregates to skip
        """
        pass

    @abstractmethod
    async def update(self, entity: TAggregate) -> None:
        """
        Write back the state of an existing aggregate.

        Raises:
            DomainError: The aggregate's not-found error if it does not exist
        """
        pass

    @abstractmethod
    async def delete(self, id: int) -> None:
        """
        Soft delete an aggregate.

        Raises:
            DomainError: The aggregate's not-found error if it does not exist
                or is already deleted
        """
        pass

    @abstractmethod
    async def count(self) -> int:
        """Count aggregates that are not soft deleted."""
        pass
