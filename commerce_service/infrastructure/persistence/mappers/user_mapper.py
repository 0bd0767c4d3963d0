"""
Mapper between the User entity and UserModel.

Isolates the domain layer from persistence details.
"""

from datetime import datetime, timezone
from typing import Optional

from ....domain.user.entities import User
from ..models import UserModel


def as_utc(value: Optional[datetime]) -> Optional[datetime]:
    """SQLite drops tzinfo on read; stored values are always UTC."""
    if value is None or value.tzinfo is not None:
        return value
    return value.replace(tzinfo=timezone.utc)


class UserMapper:
    """
    Mapper between the User aggregate and UserModel.

    Example:
        >>> mapper = UserMapper()
        >>> model = mapper.to_model(user)
        >>> entity = mapper.to_entity(model)
    """

    def to_entity(self, model: UserModel) -> User:
        return User(
            id=model.id,
            email=model.email,
            name=model.name,
            password=model.password,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            deleted_at=as_utc(model.deleted_at),
        )

    def to_model(self, entity: User) -> UserModel:
        return UserModel(
            id=entity.id,
            email=entity.email,
            name=entity.name,
            password=entity.password,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
        )

    def update_model(self, model: UserModel, entity: User) -> None:
        """Copy mutable entity fields onto an existing model."""
        model.email = entity.email
        model.name = entity.name
        model.password = entity.password
        model.updated_at = entity.updated_at
        model.deleted_at = entity.deleted_at
