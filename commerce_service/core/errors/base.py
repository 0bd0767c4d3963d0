"""
Base exceptions for the commerce service.

Defines the exception hierarchy shared by every layer of the application.
"""

from typing import Any, Dict, Optional


class CommerceServiceError(Exception):
    """
    Base exception for all commerce service errors.

    Every custom exception inherits from this class, so callers can catch
    all application failures in one place.

    Attributes:
        message: Human-readable error message
        details: Extra context about the failure
        error_code: Stable code identifying the failure

    Example:
        >>> try:
        ...     raise CommerceServiceError("Something went wrong")
        ... except CommerceServiceError as e:
        ...     print(f"Error: {e}")
    """

    def __init__(
        self,
        message: str,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        self.message = message
        self.details = details or {}
        self.error_code = error_code or self.__class__.__name__
        super().__init__(self.message)

    def to_dict(self) -> Dict[str, Any]:
        """
        Convert the exception to a dictionary.

        Used for logging and API responses.

        Returns:
            Dictionary with error information
        """
        return {
            "error_code": self.error_code,
            "message": self.message,
            "details": self.details
        }

    def __str__(self) -> str:
        return self.message


class DomainError(CommerceServiceError):
    """
    Base exception for domain layer errors.

    Raised when a business rule or an aggregate invariant is violated.
    Subclasses define a default ``default_message`` and ``default_code`` so
    they can be raised without arguments, like named sentinels.

    Example:
        >>> raise DomainError("Invalid business rule")
    """

    default_message: str = "domain error"
    default_code: Optional[str] = None

    def __init__(
        self,
        message: Optional[str] = None,
        details: Optional[Dict[str, Any]] = None,
        error_code: Optional[str] = None
    ):
        super().__init__(
            message=message or self.default_message,
            details=details,
            error_code=error_code or self.default_code
        )


class InfrastructureError(CommerceServiceError):
    """
    Base exception for infrastructure layer errors.

    Used for failures of external systems: database, filesystem, network.

    Example:
        >>> raise InfrastructureError("Database connection failed")
    """
    pass
