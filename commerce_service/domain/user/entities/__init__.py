"""Entities of the user aggregate."""

from .user import User

__all__ = ["User"]
