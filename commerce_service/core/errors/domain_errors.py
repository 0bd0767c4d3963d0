"""
Domain exceptions.

The closed set of business rule violations for the user and order
aggregates. Each class can be raised without arguments and carries the
default message for its condition.
"""

from .base import DomainError


# ==================== Order ====================

class InvalidUserIDError(DomainError):
    """Owning user identifier is zero or missing."""
    default_message = "invalid user ID"
    default_code = "INVALID_USER_ID"


class EmptyOrderError(DomainError):
    """Order created without items."""
    default_message = "order must contain at least one item"
    default_code = "EMPTY_ORDER"


class OrderNotModifiableError(DomainError):
    """Items changed on an order that is no longer pending."""
    default_message = "order cannot be modified in current status"
    default_code = "ORDER_NOT_MODIFIABLE"


class OrderItemNotFoundError(DomainError):
    """No item with the requested id in the order."""
    default_message = "order item not found"
    default_code = "ORDER_ITEM_NOT_FOUND"


class InvalidOrderItemError(DomainError):
    """Item quantity is not positive or price is negative."""
    default_message = "order item must have positive quantity and non-negative price"
    default_code = "INVALID_ORDER_ITEM"


class InvalidOrderStatusTransitionError(DomainError):
    """Status change not allowed by the order lifecycle."""
    default_message = "invalid order status transition"
    default_code = "INVALID_ORDER_STATUS_TRANSITION"


class CannotCancelDeliveredOrderError(DomainError):
    """Cancel requested on a delivered order."""
    default_message = "cannot cancel delivered order"
    default_code = "CANNOT_CANCEL_DELIVERED_ORDER"


class OrderNotFoundError(DomainError):
    default_message = "order not found"
    default_code = "ORDER_NOT_FOUND"


# ==================== User ====================

class InvalidEmailError(DomainError):
    default_message = "email is required"
    default_code = "INVALID_EMAIL"


class InvalidNameError(DomainError):
    default_message = "name is required"
    default_code = "INVALID_NAME"


class InvalidPasswordError(DomainError):
    default_message = "password is required"
    default_code = "INVALID_PASSWORD"


class UserNotFoundError(DomainError):
    default_message = "user not found"
    default_code = "USER_NOT_FOUND"


class EmailExistsError(DomainError):
    default_message = "user with this email already exists"
    default_code = "EMAIL_EXISTS"
