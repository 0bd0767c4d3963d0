"""
Routers of the v1 API.
"""

from .users_router import router as users_router
from .orders_router import router as orders_router

__all__ = [
    "users_router",
    "orders_router",
]
