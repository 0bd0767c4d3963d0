"""
Order aggregate.

The order is the aggregate root and exclusively owns its items. All changes
go through the order's methods, which enforce the lifecycle rules and keep
``total_amount`` equal to the sum of item subtotals.
"""

from typing import Iterable, List, Optional

from pydantic import Field

from commerce_service.core.errors import (
    CannotCancelDeliveredOrderError,
    EmptyOrderError,
    InvalidOrderItemError,
    InvalidOrderStatusTransitionError,
    InvalidUserIDError,
    OrderItemNotFoundError,
    OrderNotModifiableError,
)
from commerce_service.domain.order.value_objects import OrderStatus
from commerce_service.domain.shared.base_entity import AggregateRoot, Entity


class OrderItem(Entity):
    """
    Line item owned by an order.

    Attributes:
        order_id: Back-reference to the parent order (set on persistence)
        product_id: Ordered product
        quantity: Number of units, strictly positive
        price: Unit price, non-negative
    """

    order_id: Optional[int] = Field(default=None, description="Parent order id")
    product_id: int = Field(..., description="Ordered product id")
    quantity: int = Field(..., description="Number of units")
    price: float = Field(..., description="Unit price")

    @classmethod
    def create(cls, product_id: int, quantity: int, price: float) -> "OrderItem":
        """
        Build a new item.

        Raises:
            InvalidOrderItemError: If quantity <= 0 or price < 0
        """
        if quantity <= 0 or price < 0:
            raise InvalidOrderItemError(
                details={"product_id": product_id, "quantity": quantity, "price": price}
            )
        return cls(product_id=product_id, quantity=quantity, price=price)

    @property
    def subtotal(self) -> float:
        return self.price * self.quantity


class Order(AggregateRoot):
    """
    Order aggregate root.

    Business rules:
    - An order belongs to a user and has at least one item when created
    - Items can be added or removed only while the order is pending
    - Status moves forward only: pending → confirmed → shipped → delivered
    - Any non-terminal order can be cancelled, a delivered order cannot
    - total_amount is derived from the items and never set directly

    Example:
        >>> order = Order.create(user_id=42, items=[OrderItem.create(7, 2, 10.0)])
        >>> order.total_amount
        20.0
        >>> order.confirm()
        >>> order.status
        <OrderStatus.CONFIRMED: 'confirmed'>
    """

    user_id: int = Field(..., description="Owning user id")
    status: OrderStatus = Field(
        default=OrderStatus.PENDING,
        description="Current lifecycle status"
    )
    items: List[OrderItem] = Field(
        default_factory=list,
        description="Owned line items, in insertion order"
    )
    total_amount: float = Field(
        default=0.0,
        description="Sum of price * quantity over all items"
    )

    @classmethod
    def create(cls, user_id: int, items: Iterable[OrderItem]) -> "Order":
        """
        Create a new pending order.

        Args:
            user_id: Owning user id, must be positive
            items: Initial items, at least one

        Raises:
            InvalidUserIDError: If user_id is zero or missing
            EmptyOrderError: If no items are given
        """
        if not user_id or user_id < 0:
            raise InvalidUserIDError(details={"user_id": user_id})

        owned_items = list(items)
        if not owned_items:
            raise EmptyOrderError()

        order = cls(user_id=user_id, items=owned_items)
        order.updated_at = order.created_at
        order._calculate_total()
        return order

    # ==================== Items ====================

    def add_item(self, product_id: int, quantity: int, price: float) -> OrderItem:
        """
        Append a new item to a pending order.

        Returns:
            The newly created item (without id until the order is persisted)

        Raises:
            OrderNotModifiableError: If the order is not pending
            InvalidOrderItemError: If quantity <= 0 or price < 0
        """
        self._ensure_modifiable()

        item = OrderItem.create(product_id=product_id, quantity=quantity, price=price)
        item.order_id = self.id

        self.items.append(item)
        self._calculate_total()
        self.mark_updated()
        return item

    def remove_item(self, item_id: int) -> None:
        """
        Remove an item from a pending order.

        Only persisted items can be removed; an item added since the last save
        has no id yet and is not matched.

        Raises:
            OrderNotModifiableError: If the order is not pending
            OrderItemNotFoundError: If no item has the given id
        """
        self._ensure_modifiable()

        for index, item in enumerate(self.items):
            if item.id is not None and item.id == item_id:
                del self.items[index]
                self._calculate_total()
                self.mark_updated()
                return

        raise OrderItemNotFoundError(details={"order_id": self.id, "item_id": item_id})

    def get_item(self, item_id: int) -> Optional[OrderItem]:
        for item in self.items:
            if item.id == item_id:
                return item
        return None

    # ==================== Lifecycle ====================

    def confirm(self) -> None:
        """pending → confirmed"""
        self._transition_to(OrderStatus.CONFIRMED)

    def ship(self) -> None:
        """confirmed → shipped"""
        self._transition_to(OrderStatus.SHIPPED)

    def deliver(self) -> None:
        """shipped → delivered"""
        self._transition_to(OrderStatus.DELIVERED)

    def cancel(self) -> None:
        """
        Cancel the order.

        Raises:
            CannotCancelDeliveredOrderError: If the order was delivered
            InvalidOrderStatusTransitionError: If the order is already cancelled
        """
        if self.status is OrderStatus.DELIVERED:
            raise CannotCancelDeliveredOrderError(details={"order_id": self.id})
        self._transition_to(OrderStatus.CANCELLED)

    # ==================== Internals ====================

    def _transition_to(self, target: OrderStatus) -> None:
        if not self.status.can_transition_to(target):
            raise InvalidOrderStatusTransitionError(
                details={
                    "order_id": self.id,
                    "from_status": self.status.value,
                    "to_status": target.value,
                }
            )
        self.status = target
        self.mark_updated()

    def _ensure_modifiable(self) -> None:
        if not self.status.allows_item_changes():
            raise OrderNotModifiableError(
                details={"order_id": self.id, "status": self.status.value}
            )

    def _calculate_total(self) -> None:
        # Full recomputation on every change.
        self.total_amount = sum((item.subtotal for item in self.items), 0.0)
