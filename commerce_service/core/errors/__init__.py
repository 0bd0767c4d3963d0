"""
Custom exceptions for the commerce service.

This module exposes the exception hierarchy used across all layers.
"""

from .base import (
    CommerceServiceError,
    DomainError,
    InfrastructureError
)

from .domain_errors import (
    InvalidUserIDError,
    EmptyOrderError,
    OrderNotModifiableError,
    OrderItemNotFoundError,
    InvalidOrderItemError,
    InvalidOrderStatusTransitionError,
    CannotCancelDeliveredOrderError,
    OrderNotFoundError,
    InvalidEmailError,
    InvalidNameError,
    InvalidPasswordError,
    UserNotFoundError,
    EmailExistsError
)

from .infrastructure_errors import RepositoryError

__all__ = [
    # Base exceptions
    "CommerceServiceError",
    "DomainError",
    "InfrastructureError",

    # Order
    "InvalidUserIDError",
    "EmptyOrderError",
    "OrderNotModifiableError",
    "OrderItemNotFoundError",
    "InvalidOrderItemError",
    "InvalidOrderStatusTransitionError",
    "CannotCancelDeliveredOrderError",
    "OrderNotFoundError",

    # User
    "InvalidEmailError",
    "InvalidNameError",
    "InvalidPasswordError",
    "UserNotFoundError",
    "EmailExistsError",

    # Infrastructure
    "RepositoryError",
]
