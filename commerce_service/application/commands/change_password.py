"""
Change-password command.
"""

from pydantic import Field

from .base import Command, CommandHandler
from .password_policy import ensure_password_policy
from ..dto.user_dto import UserDTO
from ..use_cases.user_use_case import UserUseCase


class ChangePasswordCommand(Command):
    """
    Command to replace a user's password.

    Attributes:
        user_id: Target user
        password: New plain password, hashed before storage
    """

    user_id: int = Field(description="User id")
    password: str = Field(repr=False, description="New plain password")


class ChangePasswordHandler(CommandHandler[UserDTO]):
    """
    Handler for ChangePasswordCommand.

    Applies the same length policy as registration.
    """

    def __init__(self, user_use_case: UserUseCase, min_password_length: int = 8):
        self._user_use_case = user_use_case
        self._min_password_length = min_password_length

    async def handle(self, command: ChangePasswordCommand) -> UserDTO:
        """
        Raises:
            InvalidPasswordError: If the password is shorter than the policy allows
            UserNotFoundError: If the user does not exist or is deleted
        """
        ensure_password_policy(command.password, self._min_password_length)

        user = await self._user_use_case.change_password(command.user_id, command.password)
        return UserDTO.from_entity(user)
