"""
Data Transfer Objects for users.

DTOs isolate the domain entities from the API and other layers. The
password never leaves the application layer.
"""

from datetime import datetime
from typing import Optional

from pydantic import BaseModel, Field

from ...domain.user.entities import User


class UserDTO(BaseModel):
    """
    Public view of a user.

    Example:
        >>> dto = UserDTO.from_entity(user)
        >>> dto.email
        'john@example.com'
    """

    id: int = Field(description="User id")
    email: str = Field(description="Email address")
    name: str = Field(description="Display name")
    created_at: datetime = Field(description="Creation time")
    updated_at: datetime = Field(description="Last update time")
    deleted_at: Optional[datetime] = Field(default=None, description="Soft deletion time")

    @classmethod
    def from_entity(cls, user: User) -> "UserDTO":
        return cls(
            id=user.id,
            email=user.email,
            name=user.name,
            created_at=user.created_at,
            updated_at=user.updated_at,
            deleted_at=user.deleted_at,
        )


class UserStatsResult(BaseModel):
    """Aggregated user counters."""

    total_users: int = Field(description="Users including soft-deleted ones")
    active_users: int = Field(description="Users that are not soft deleted")
    deleted_users: int = Field(description="Soft-deleted users")
