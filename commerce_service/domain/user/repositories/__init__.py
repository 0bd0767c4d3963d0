"""Repository interfaces of the user aggregate."""

from .user_repository import UserRepository

__all__ = ["UserRepository"]
