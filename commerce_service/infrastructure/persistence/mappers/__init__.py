"""
Mappers between domain entities and database models.
"""

from .user_mapper import UserMapper
from .order_mapper import OrderMapper

__all__ = [
    "UserMapper",
    "OrderMapper",
]
