"""
Base Entity classes for the domain layer.

Entities are identified by their id rather than their attributes. Ids are
assigned by the repository on create, so a freshly built entity has
``id is None`` until it is persisted.
"""

from datetime import datetime, timezone
from typing import Any, Optional

from pydantic import BaseModel, Field


def utc_now() -> datetime:
    """Current time in UTC."""
    return datetime.now(timezone.utc)


class Entity(BaseModel):
    """
    Base class for all domain entities.

    Two persisted entities of the same type with the same id are equal even
    if their attributes differ. Unpersisted entities (no id yet) are only
    equal to themselves.

    Attributes:
        id: Identifier assigned on persistence
        created_at: Creation timestamp (UTC)
    """

    id: Optional[int] = Field(
        default=None,
        description="Identifier assigned on persistence"
    )
    created_at: datetime = Field(
        default_factory=utc_now,
        description="Creation timestamp (UTC)"
    )

    def __eq__(self, other: Any) -> bool:
        if not isinstance(other, Entity) or type(self) is not type(other):
            return False
        if self.id is None or other.id is None:
            return self is other
        return self.id == other.id

    def __hash__(self) -> int:
        if self.id is None:
            return id(self)
        return hash((self.id, type(self)))

    def __repr__(self) -> str:
        return f"{self.__class__.__name__}(id={self.id})"


class AggregateRoot(Entity):
    """
    Base class for aggregate roots.

    Adds modification tracking and soft deletion: ``deleted_at`` is a
    nullable timestamp, its presence marks the aggregate as logically
    removed while its data is retained.

    Attributes:
        updated_at: Last modification timestamp (UTC)
        deleted_at: Soft deletion timestamp, None while the aggregate is live
    """

    updated_at: datetime = Field(
        default_factory=utc_now,
        description="Last update timestamp (UTC)"
    )
    deleted_at: Optional[datetime] = Field(
        default=None,
        description="Soft deletion timestamp (UTC)"
    )

    def mark_updated(self) -> None:
        """Bump updated_at to the current time."""
        self.updated_at = utc_now()

    def is_deleted(self) -> bool:
        """Check whether the aggregate is soft deleted."""
        return self.deleted_at is not None

    def mark_as_deleted(self) -> None:
        """
        Soft delete the aggregate.

        Sets deleted_at and updated_at to the same instant.
        """
        now = utc_now()
        self.deleted_at = now
        self.updated_at = now
