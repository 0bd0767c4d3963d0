"""
Create-user command.

Applies the password policy before handing off to the user use case.
"""

from pydantic import Field

from .base import Command, CommandHandler
from .password_policy import ensure_password_policy
from ..dto.user_dto import UserDTO
from ..use_cases.user_use_case import UserUseCase


class CreateUserCommand(Command):
    """
    Command to register a new user.

    Attributes:
        email: User email
        name: Display name
        password: Plain password, hashed before storage
    """

    email: str = Field(description="User email")
    name: str = Field(description="Display name")
    password: str = Field(repr=False, description="Plain password")


class CreateUserHandler(CommandHandler[UserDTO]):
    """
    Handler for CreateUserCommand.

    Example:
        >>> handler = CreateUserHandler(user_use_case, min_password_length=8)
        >>> dto = await handler.handle(
        ...     CreateUserCommand(email="john@example.com", name="John", password="s3cret-pass")
        ... )
    """

    def __init__(self, user_use_case: UserUseCase, min_password_length: int = 8):
        self._user_use_case = user_use_case
        self._min_password_length = min_password_length

    async def handle(self, command: CreateUserCommand) -> UserDTO:
        """
        Raises:
            InvalidPasswordError: If the password is shorter than the policy allows
            EmailExistsError: If the email is taken
        """
        ensure_password_policy(command.password, self._min_password_length)

        user = await self._user_use_case.create_user(
            email=command.email,
            name=command.name,
            password=command.password
        )
        return UserDTO.from_entity(user)
