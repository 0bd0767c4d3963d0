"""
Order status and its lifecycle transitions.

Transition rules:
- PENDING → CONFIRMED, CANCELLED
- CONFIRMED → SHIPPED, CANCELLED
- SHIPPED → DELIVERED, CANCELLED
- DELIVERED → (terminal)
- CANCELLED → (terminal)
"""

from enum import Enum
from typing import Dict, FrozenSet


class OrderStatus(str, Enum):
    """
    Possible order statuses.

    Example:
        >>> OrderStatus.PENDING.can_transition_to(OrderStatus.CONFIRMED)
        True
        >>> OrderStatus.PENDING.can_transition_to(OrderStatus.SHIPPED)
        False
        >>> OrderStatus.DELIVERED.is_terminal()
        True
    """
    PENDING = "pending"
    CONFIRMED = "confirmed"
    SHIPPED = "shipped"
    DELIVERED = "delivered"
    CANCELLED = "cancelled"

    @classmethod
    def from_string(cls, value: str) -> "OrderStatus":
        """
        Build a status from its string value.

        Raises:
            ValueError: If the value is not a known status
        """
        try:
            return cls(value)
        except ValueError:
            valid_values = [s.value for s in cls]
            raise ValueError(
                f"Invalid order status: '{value}'. "
                f"Valid values: {', '.join(valid_values)}"
            )

    def can_transition_to(self, target: "OrderStatus") -> bool:
        """Check whether moving to target is allowed from this status."""
        return target in _VALID_TRANSITIONS[self]

    def is_terminal(self) -> bool:
        """Terminal statuses allow no further transitions."""
        return not _VALID_TRANSITIONS[self]

    def allows_item_changes(self) -> bool:
        """Items can only be added or removed while the order is pending."""
        return self is OrderStatus.PENDING

    def __str__(self) -> str:
        return self.value


_VALID_TRANSITIONS: Dict[OrderStatus, FrozenSet[OrderStatus]] = {
    OrderStatus.PENDING: frozenset({OrderStatus.CONFIRMED, OrderStatus.CANCELLED}),
    OrderStatus.CONFIRMED: frozenset({OrderStatus.SHIPPED, OrderStatus.CANCELLED}),
    OrderStatus.SHIPPED: frozenset({OrderStatus.DELIVERED, OrderStatus.CANCELLED}),
    OrderStatus.DELIVERED: frozenset(),
    OrderStatus.CANCELLED: frozenset(),
}
