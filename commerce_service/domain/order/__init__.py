"""
Order bounded context.

Contains the order aggregate (Order, OrderItem), its status lifecycle and
the repository contract.
"""

from .entities import Order, OrderItem
from .repositories import OrderRepository
from .value_objects import OrderStatus

__all__ = [
    "Order",
    "OrderItem",
    "OrderStatus",
    "OrderRepository",
]
