"""
Base classes for commands.

A command expresses an intent to change system state. A command handler
executes it and returns the result.
"""

from abc import ABC, abstractmethod
from typing import Generic, TypeVar

from pydantic import BaseModel, ConfigDict


TResult = TypeVar('TResult')


class Command(BaseModel, ABC):
    """
    Base class for commands.

    Commands are named in the imperative (CreateUser, ChangePassword) and
    are immutable once built.

    Example:
        >>> class RenameUserCommand(Command):
        ...     user_id: int
        ...     name: str
        >>> command = RenameUserCommand(user_id=1, name="John")
    """

    model_config = ConfigDict(frozen=True)


class CommandHandler(ABC, Generic[TResult]):
    """
    Base class for command handlers.

    Type Parameters:
        TResult: Type returned by handle()
    """

    @abstractmethod
    async def handle(self, command: Command) -> TResult:
        """
        Execute the command.

        Raises:
            DomainError: If a business rule is violated
            InfrastructureError: If persistence fails
        """
        pass
