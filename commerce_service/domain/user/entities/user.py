"""
User aggregate.

Enforces the structural rules of a user: email, name and password must be
present. Policy rules (password length, email uniqueness) live in the
application layer.
"""

from pydantic import Field

from commerce_service.core.errors import (
    InvalidEmailError,
    InvalidNameError,
    InvalidPasswordError,
)
from commerce_service.domain.shared.base_entity import AggregateRoot, utc_now


class User(AggregateRoot):
    """
    User aggregate root.

    Attributes:
        email: Unique email address
        name: Display name
        password: Stored password (hashed before persistence)

    Example:
        >>> user = User.create("john@example.com", "John", "s3cret-pass")
        >>> user.update_info(name="", email="jane@example.com")
        >>> user.name, user.email
        ('John', 'jane@example.com')
    """

    email: str = Field(..., description="Unique email address")
    name: str = Field(..., description="Display name")
    password: str = Field(..., repr=False, description="Stored password")

    @classmethod
    def create(cls, email: str, name: str, password: str) -> "User":
        """
        Create a new user.

        Raises:
            InvalidEmailError: If email is empty
            InvalidNameError: If name is empty
            InvalidPasswordError: If password is empty
        """
        if not email:
            raise InvalidEmailError()
        if not name:
            raise InvalidNameError()
        if not password:
            raise InvalidPasswordError()

        now = utc_now()
        return cls(
            email=email,
            name=name,
            password=password,
            created_at=now,
            updated_at=now,
        )

    def update_info(self, name: str = "", email: str = "") -> None:
        """
        Overwrite name and/or email.

        An empty value leaves the field unchanged, it never clears it.
        """
        if name:
            self.name = name
        if email:
            self.email = email
        self.mark_updated()

    def change_password(self, new_password: str) -> None:
        """
        Replace the stored password.

        Raises:
            InvalidPasswordError: If new_password is empty
        """
        if not new_password:
            raise InvalidPasswordError()

        self.password = new_password
        self.mark_updated()

    def activate(self) -> None:
        """Undo a soft delete."""
        self.deleted_at = None
        self.mark_updated()

    def __repr__(self) -> str:
        return f"User(id={self.id}, email={self.email})"
