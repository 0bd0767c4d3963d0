"""
Use cases of the application layer.

Each use case coordinates repositories and aggregates for one bounded
context. Business rules stay in the domain layer.
"""

from .order_use_case import OrderItemRequest, OrderUseCase
from .user_use_case import UserUseCase

__all__ = [
    "UserUseCase",
    "OrderUseCase",
    "OrderItemRequest",
]
