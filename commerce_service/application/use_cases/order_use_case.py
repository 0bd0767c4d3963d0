"""
Use case for order management.

Every mutation follows the same shape: load the aggregate, call the entity
method that enforces the rule, write the aggregate back.
"""

import logging
from dataclasses import dataclass
from typing import Callable, Iterable, List, Optional

from ...domain.order.entities import Order, OrderItem
from ...domain.order.repositories import OrderRepository
from ...domain.user.repositories import UserRepository

logger = logging.getLogger("commerce-service.use_cases.orders")


@dataclass(frozen=True)
class OrderItemRequest:
    """
    Item data for a new order.

    Attributes:
        product_id: Ordered product
        quantity: Number of units
        price: Unit price
    """
    product_id: int
    quantity: int
    price: float


class OrderUseCase:
    """
    Business operations on orders.

    Dependencies:
        - OrderRepository: order persistence
        - UserRepository: checks that the owning user exists

    Example:
        >>> use_case = OrderUseCase(order_repository, user_repository)
        >>> order = await use_case.create_order(42, [OrderItemRequest(7, 2, 10.0)])
        >>> order.total_amount
        20.0
    """

    def __init__(
        self,
        order_repository: OrderRepository,
        user_repository: UserRepository
    ):
        self._order_repository = order_repository
        self._user_repository = user_repository

    async def create_order(
        self,
        user_id: int,
        items: Iterable[OrderItemRequest]
    ) -> Order:
        """
        Create a pending order for an existing user.

        Raises:
            InvalidUserIDError: If user_id is zero
            EmptyOrderError: If no items are given
            InvalidOrderItemError: If an item has a bad quantity or price
            UserNotFoundError: If the user does not exist or is deleted
        """
        order = Order.create(
            user_id=user_id,
            items=[
                OrderItem.create(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price
                )
                for item in items
            ]
        )

        await self._user_repository.get_by_id(user_id)

        await self._order_repository.create(order)
        logger.info(
            f"Order created: {order.id} for user {user_id} "
            f"({len(order.items)} items, total {order.total_amount})"
        )
        return order

    async def get_order(self, order_id: int) -> Order:
        """
        Raises:
            OrderNotFoundError: If the order does not exist or is deleted
        """
        return await self._order_repository.get_by_id(order_id)

    async def get_user_orders(self, user_id: int, limit: int, offset: int) -> List[Order]:
        return await self._order_repository.get_by_user_id(user_id, limit, offset)

    async def list_orders(self, limit: int, offset: int) -> List[Order]:
        return await self._order_repository.get_all(limit, offset)

    async def get_order_items(self, order_id: int) -> List[OrderItem]:
        order = await self._order_repository.get_by_id(order_id)
        return list(order.items)

    async def add_item(
        self,
        order_id: int,
        product_id: int,
        quantity: int,
        price: float
    ) -> Order:
        """
        Raises:
            OrderNotFoundError: If the order does not exist
            OrderNotModifiableError: If the order is not pending
            InvalidOrderItemError: If quantity or price is out of range
        """
        return await self._mutate(
            order_id,
            lambda order: order.add_item(product_id, quantity, price),
            action="item added"
        )

    async def remove_item(self, order_id: int, item_id: int) -> Order:
        """
        Raises:
            OrderNotFoundError: If the order does not exist
            OrderNotModifiableError: If the order is not pending
            OrderItemNotFoundError: If the item is not part of the order
        """
        return await self._mutate(
            order_id,
            lambda order: order.remove_item(item_id),
            action=f"item {item_id} removed"
        )

    async def confirm_order(self, order_id: int) -> Order:
        return await self._mutate(order_id, Order.confirm, action="confirmed")

    async def ship_order(self, order_id: int) -> Order:
        return await self._mutate(order_id, Order.ship, action="shipped")

    async def deliver_order(self, order_id: int) -> Order:
        return await self._mutate(order_id, Order.deliver, action="delivered")

    async def cancel_order(self, order_id: int) -> Order:
        return await self._mutate(order_id, Order.cancel, action="cancelled")

    async def delete_order(self, order_id: int) -> None:
        """
        Soft delete an order.

        Raises:
            OrderNotFoundError: If the order does not exist or is already deleted
        """
        await self._order_repository.delete(order_id)
        logger.info(f"Order deleted: {order_id}")

    async def _mutate(
        self,
        order_id: int,
        operation: Callable[[Order], Optional[object]],
        action: str
    ) -> Order:
        order = await self._order_repository.get_by_id(order_id)

        operation(order)

        await self._order_repository.update(order)
        logger.info(f"Order {order.id} {action} (status={order.status.value}, total={order.total_amount})")
        return order
