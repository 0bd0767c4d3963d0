"""
Repository implementations on top of SQLAlchemy.
"""

from .user_repository_impl import UserRepositoryImpl
from .order_repository_impl import OrderRepositoryImpl

__all__ = [
    "UserRepositoryImpl",
    "OrderRepositoryImpl",
]
