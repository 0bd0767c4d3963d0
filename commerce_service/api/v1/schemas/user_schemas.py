"""
API schemas for user endpoints.
"""

from typing import List, Optional

from pydantic import BaseModel, EmailStr, Field

from ....application.dto import UserDTO


class CreateUserRequest(BaseModel):
    """
    Request to register a user.

    Example:
        {
            "email": "john@example.com",
            "name": "John",
            "password": "s3cret-pass"
        }
    """

    email: EmailStr = Field(description="User email")
    name: str = Field(description="Display name")
    password: str = Field(description="Plain password")


class UpdateUserRequest(BaseModel):
    """
    Request to update a user.

    Missing or empty fields are left unchanged.
    """

    email: Optional[EmailStr] = Field(default=None, description="New email")
    name: str = Field(default="", description="New display name")


class ChangePasswordRequest(BaseModel):
    """Request to replace a user's password."""

    password: str = Field(description="New plain password")


class ListUsersResponse(BaseModel):
    """
    Page of users.

    Attributes:
        users: Users of the page
        limit: Effective page size
        offset: Effective offset
        count: Number of users in this page
    """

    users: List[UserDTO] = Field(description="Users")
    limit: int = Field(description="Effective page size")
    offset: int = Field(description="Effective offset")
    count: int = Field(description="Number of users returned")
