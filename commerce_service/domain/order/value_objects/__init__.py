"""Value objects for the order aggregate."""

from .order_status import OrderStatus

__all__ = ["OrderStatus"]
