"""
SQLAlchemy models for persistence.

Models are used only inside the infrastructure layer.
"""

from .base import Base
from .user import UserModel
from .order import OrderModel, OrderItemModel

__all__ = [
    "Base",
    "UserModel",
    "OrderModel",
    "OrderItemModel",
]
