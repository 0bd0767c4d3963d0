"""
Commands of the application layer.
"""

from .base import Command, CommandHandler
from .change_password import ChangePasswordCommand, ChangePasswordHandler
from .create_user import CreateUserCommand, CreateUserHandler
from .password_policy import ensure_password_policy

__all__ = [
    "Command",
    "CommandHandler",
    "CreateUserCommand",
    "CreateUserHandler",
    "ChangePasswordCommand",
    "ChangePasswordHandler",
    "ensure_password_policy",
]
