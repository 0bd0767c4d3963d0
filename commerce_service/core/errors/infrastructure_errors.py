"""
Infrastructure exceptions.

Failures of the storage layer that are not business rule violations.
"""

from typing import Any, Dict, Optional

from .base import InfrastructureError


class RepositoryError(InfrastructureError):
    """
    Repository operation failed.

    Wraps unexpected database errors so the application layer never sees
    driver-specific exceptions.

    Example:
        >>> raise RepositoryError(operation="create", entity="Order", reason="disk I/O error")
    """

    def __init__(
        self,
        operation: str,
        entity: str,
        reason: str,
        details: Optional[Dict[str, Any]] = None
    ):
        message = f"Repository {operation} failed for {entity}: {reason}"
        super().__init__(
            message=message,
            details={
                "operation": operation,
                "entity": entity,
                "reason": reason,
                **(details or {})
            },
            error_code="REPOSITORY_ERROR"
        )
        self.operation = operation
        self.entity = entity
