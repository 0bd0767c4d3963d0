"""
Data Transfer Objects for orders.
"""

from datetime import datetime
from typing import List, Optional

from pydantic import BaseModel, Field

from ...domain.order.entities import Order, OrderItem


class OrderItemDTO(BaseModel):
    """Line item of an order."""

    id: Optional[int] = Field(default=None, description="Item id")
    order_id: Optional[int] = Field(default=None, description="Parent order id")
    product_id: int = Field(description="Product id")
    quantity: int = Field(description="Number of units")
    price: float = Field(description="Unit price")
    subtotal: float = Field(description="price * quantity")
    created_at: datetime = Field(description="Creation time")

    @classmethod
    def from_entity(cls, item: OrderItem) -> "OrderItemDTO":
        return cls(
            id=item.id,
            order_id=item.order_id,
            product_id=item.product_id,
            quantity=item.quantity,
            price=item.price,
            subtotal=item.subtotal,
            created_at=item.created_at,
        )


class OrderDTO(BaseModel):
    """
    Full view of an order with its items.

    Example:
        >>> dto = OrderDTO.from_entity(order)
        >>> dto.status
        'pending'
    """

    id: int = Field(description="Order id")
    user_id: int = Field(description="Owning user id")
    status: str = Field(description="Lifecycle status")
    total_amount: float = Field(description="Sum of item subtotals")
    item_count: int = Field(description="Number of items")
    items: List[OrderItemDTO] = Field(default_factory=list, description="Items")
    created_at: datetime = Field(description="Creation time")
    updated_at: datetime = Field(description="Last update time")

    @classmethod
    def from_entity(cls, order: Order) -> "OrderDTO":
        return cls(
            id=order.id,
            user_id=order.user_id,
            status=order.status.value,
            total_amount=order.total_amount,
            item_count=len(order.items),
            items=[OrderItemDTO.from_entity(item) for item in order.items],
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
