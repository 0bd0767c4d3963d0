"""
Request and response schemas of the v1 API.
"""

from .user_schemas import (
    CreateUserRequest,
    UpdateUserRequest,
    ChangePasswordRequest,
    ListUsersResponse,
)
from .order_schemas import (
    OrderItemRequest,
    CreateOrderRequest,
    AddOrderItemRequest,
    ListOrdersResponse,
)

__all__ = [
    "CreateUserRequest",
    "UpdateUserRequest",
    "ChangePasswordRequest",
    "ListUsersResponse",
    "OrderItemRequest",
    "CreateOrderRequest",
    "AddOrderItemRequest",
    "ListOrdersResponse",
]
