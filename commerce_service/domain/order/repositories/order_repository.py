"""
OrderRepository interface.

Storage-agnostic contract for order persistence, implemented by the
infrastructure layer.
"""

from abc import abstractmethod
from typing import List

from commerce_service.domain.order.entities import Order
from commerce_service.domain.shared.repository import Repository


class OrderRepository(Repository[Order]):
    """
    Repository for the order aggregate.

    Items are persisted together with their order: create and update write
    the whole aggregate, and any lookup returns the order with its items.
    Not-found lookups raise OrderNotFoundError.
    """

    @abstractmethod
    async def get_by_user_id(
        self,
        user_id: int,
        limit: int,
        offset: int
    ) -> List[Order]:
        """
        List a user's orders ordered by id.

        Args:
            user_id: Owning user id
            limit: Maximum number of orders to return
            offset: Number of orders to skip
        """
        pass
