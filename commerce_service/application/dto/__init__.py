"""
Data Transfer Objects of the application layer.
"""

from .order_dto import OrderDTO, OrderItemDTO
from .user_dto import UserDTO, UserStatsResult

__all__ = [
    "UserDTO",
    "UserStatsResult",
    "OrderDTO",
    "OrderItemDTO",
]
