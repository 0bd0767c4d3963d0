"""Repository interfaces of the order aggregate."""

from .order_repository import OrderRepository

__all__ = ["OrderRepository"]
