"""
Unit tests for OrderStatus.
"""

import pytest

from commerce_service.domain.order.value_objects import OrderStatus


class TestOrderStatusTransitions:

    @pytest.mark.parametrize("source,target", [
        (OrderStatus.PENDING, OrderStatus.CONFIRMED),
        (OrderStatus.PENDING, OrderStatus.CANCELLED),
        (OrderStatus.CONFIRMED, OrderStatus.SHIPPED),
        (OrderStatus.CONFIRMED, OrderStatus.CANCELLED),
        (OrderStatus.SHIPPED, OrderStatus.DELIVERED),
        (OrderStatus.SHIPPED, OrderStatus.CANCELLED),
    ])
    def test_allowed_transitions(self, source, target):
        assert source.can_transition_to(target)

    @pytest.mark.parametrize("source,target", [
        (OrderStatus.PENDING, OrderStatus.SHIPPED),
        (OrderStatus.PENDING, OrderStatus.DELIVERED),
        (OrderStatus.CONFIRMED, OrderStatus.PENDING),
        (OrderStatus.SHIPPED, OrderStatus.CONFIRMED),
        (OrderStatus.DELIVERED, OrderStatus.CANCELLED),
        (OrderStatus.CANCELLED, OrderStatus.PENDING),
        (OrderStatus.CANCELLED, OrderStatus.CANCELLED),
    ])
    def test_forbidden_transitions(self, source, target):
        assert not source.can_transition_to(target)

    def test_terminal_statuses(self):
        terminal = {s for s in OrderStatus if s.is_terminal()}
        assert terminal == {OrderStatus.DELIVERED, OrderStatus.CANCELLED}

    def test_only_pending_allows_item_changes(self):
        assert OrderStatus.PENDING.allows_item_changes()
        for status in OrderStatus:
            if status is not OrderStatus.PENDING:
                assert not status.allows_item_changes()


class TestOrderStatusParsing:

    def test_from_string(self):
        assert OrderStatus.from_string("shipped") is OrderStatus.SHIPPED

    def test_from_string_invalid(self):
        with pytest.raises(ValueError, match="Invalid order status"):
            OrderStatus.from_string("lost")

    def test_str_is_value(self):
        assert str(OrderStatus.CONFIRMED) == "confirmed"
