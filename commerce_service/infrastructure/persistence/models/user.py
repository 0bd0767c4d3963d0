"""
SQLAlchemy model for users.
"""
from datetime import datetime, timezone

from sqlalchemy import Integer, String, DateTime
from sqlalchemy.orm import Mapped, mapped_column

from .base import Base


class UserModel(Base):
    """SQLAlchemy model for a user account"""
    __tablename__ = "users"

    id: Mapped[int] = mapped_column(Integer, primary_key=True, autoincrement=True)

    email: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        unique=True,
        index=True,
        comment="Unique login email"
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)

    password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Password hash"
    )

    # Timestamps
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        nullable=False,
        default=lambda: datetime.now(timezone.utc)
    )

    deleted_at: Mapped[datetime | None] = mapped_column(
        DateTime(timezone=True),
        nullable=True,
        index=True,
        comment="Soft deletion time, NULL while the user is live"
    )

    def __repr__(self):
        return f"<UserModel(id={self.id}, email={self.email})>"
