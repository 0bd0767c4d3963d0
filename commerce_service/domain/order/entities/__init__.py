"""Entities of the order aggregate."""

from .order import Order, OrderItem

__all__ = ["Order", "OrderItem"]
