"""
API schemas for order endpoints.
"""

from typing import List

from pydantic import BaseModel, Field

from ....application.dto import OrderDTO


class OrderItemRequest(BaseModel):
    """
    Item of an order request.

    Bounds are checked by the order itself, not here.
    """

    product_id: int = Field(description="Product id")
    quantity: int = Field(description="Number of units")
    price: float = Field(description="Unit price")


class CreateOrderRequest(BaseModel):
    """
    Request to place an order.

    Example:
        {
            "user_id": 1,
            "items": [{"product_id": 7, "quantity": 2, "price": 10.0}]
        }
    """

    user_id: int = Field(description="Owning user id")
    items: List[OrderItemRequest] = Field(default_factory=list, description="Initial items")


class AddOrderItemRequest(OrderItemRequest):
    """Request to add an item to a pending order."""


class ListOrdersResponse(BaseModel):
    """Page of orders."""

    orders: List[OrderDTO] = Field(description="Orders")
    limit: int = Field(description="Effective page size")
    offset: int = Field(description="Effective offset")
    count: int = Field(description="Number of orders returned")
