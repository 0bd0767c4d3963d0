"""
User bounded context.

Contains the user aggregate and its repository contract.
"""

from .entities import User
from .repositories import UserRepository

__all__ = [
    "User",
    "UserRepository",
]
