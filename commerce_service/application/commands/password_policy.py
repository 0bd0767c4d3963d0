"""
Password policy shared by the commands that accept a new password.

The entity only rejects empty passwords; the minimum length is a policy
and is checked here, before any use case runs.
"""

from ...core.errors import InvalidPasswordError


def ensure_password_policy(password: str, min_length: int) -> None:
    """
    Raises:
        InvalidPasswordError: If password is shorter than min_length
    """
    if len(password) < min_length:
        raise InvalidPasswordError(
            message=f"password must be at least {min_length} characters",
            details={"min_length": min_length}
        )
