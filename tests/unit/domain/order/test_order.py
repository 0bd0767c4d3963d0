"""
Unit tests for the Order aggregate.
"""

import pytest

from commerce_service.core.errors import (
    CannotCancelDeliveredOrderError,
    EmptyOrderError,
    InvalidOrderItemError,
    InvalidOrderStatusTransitionError,
    InvalidUserIDError,
    OrderItemNotFoundError,
    OrderNotModifiableError,
)
from commerce_service.domain.order import Order, OrderItem, OrderStatus


@pytest.fixture
def items():
    return [
        OrderItem.create(product_id=1, quantity=2, price=10.0),
        OrderItem.create(product_id=2, quantity=1, price=5.5),
    ]


@pytest.fixture
def order(items):
    order = Order.create(user_id=42, items=items)
    # Simulate persisted ids
    order.id = 1
    for index, item in enumerate(order.items, start=1):
        item.id = index
        item.order_id = order.id
    return order


class TestOrderItem:

    def test_subtotal(self):
        item = OrderItem.create(product_id=7, quantity=3, price=2.5)
        assert item.subtotal == 7.5

    def test_zero_price_allowed(self):
        item = OrderItem.create(product_id=7, quantity=1, price=0.0)
        assert item.subtotal == 0.0

    @pytest.mark.parametrize("quantity,price", [(0, 1.0), (-1, 1.0), (1, -0.01)])
    def test_invalid_bounds(self, quantity, price):
        with pytest.raises(InvalidOrderItemError):
            OrderItem.create(product_id=7, quantity=quantity, price=price)


class TestOrderCreate:

    def test_create_pending_with_total(self, items):
        order = Order.create(user_id=42, items=items)

        assert order.status is OrderStatus.PENDING
        assert order.user_id == 42
        assert order.total_amount == 25.5
        assert order.id is None
        assert order.deleted_at is None
        assert order.created_at == order.updated_at

    def test_create_copies_items(self, items):
        order = Order.create(user_id=42, items=items)
        items.append(OrderItem.create(product_id=3, quantity=1, price=1.0))

        assert len(order.items) == 2

    def test_zero_user_id(self, items):
        with pytest.raises(InvalidUserIDError) as exc_info:
            Order.create(user_id=0, items=items)
        assert exc_info.value.message == "invalid user ID"

    def test_empty_items(self):
        with pytest.raises(EmptyOrderError) as exc_info:
            Order.create(user_id=42, items=[])
        assert exc_info.value.message == "order must contain at least one item"

    def test_user_id_checked_before_items(self):
        with pytest.raises(InvalidUserIDError):
            Order.create(user_id=0, items=[])


class TestOrderItems:

    def test_add_item_updates_total(self, order):
        before = order.updated_at

        item = order.add_item(product_id=9, quantity=4, price=1.25)

        assert item.order_id == order.id
        assert item.id is None
        assert len(order.items) == 3
        assert order.total_amount == 30.5
        assert order.updated_at >= before

    def test_remove_item_updates_total(self, order):
        order.remove_item(1)

        assert [item.id for item in order.items] == [2]
        assert order.total_amount == 5.5

    def test_remove_last_item_leaves_zero_total(self, order):
        order.remove_item(1)
        order.remove_item(2)

        assert order.items == []
        assert order.total_amount == 0.0

    def test_remove_unknown_item(self, order):
        with pytest.raises(OrderItemNotFoundError):
            order.remove_item(99)
        assert order.total_amount == 25.5

    def test_unsaved_item_cannot_be_removed_by_id(self, order):
        order.add_item(product_id=9, quantity=1, price=1.0)

        with pytest.raises(OrderItemNotFoundError):
            order.remove_item(None)
        assert len(order.items) == 3

    def test_add_item_invalid_bounds(self, order):
        with pytest.raises(InvalidOrderItemError):
            order.add_item(product_id=9, quantity=0, price=1.0)
        assert len(order.items) == 2

    def test_item_changes_rejected_after_confirm(self, order):
        order.confirm()

        with pytest.raises(OrderNotModifiableError):
            order.add_item(product_id=9, quantity=1, price=1.0)
        with pytest.raises(OrderNotModifiableError):
            order.remove_item(1)

    def test_modifiable_check_precedes_item_validation(self, order):
        order.confirm()

        with pytest.raises(OrderNotModifiableError):
            order.add_item(product_id=9, quantity=0, price=-1.0)

    def test_get_item(self, order):
        assert order.get_item(2).product_id == 2
        assert order.get_item(99) is None


class TestOrderLifecycle:

    def test_happy_path(self, order):
        order.confirm()
        assert order.status is OrderStatus.CONFIRMED
        order.ship()
        assert order.status is OrderStatus.SHIPPED
        order.deliver()
        assert order.status is OrderStatus.DELIVERED

    def test_ship_requires_confirmed(self, order):
        with pytest.raises(InvalidOrderStatusTransitionError) as exc_info:
            order.ship()
        assert exc_info.value.details["from_status"] == "pending"
        assert order.status is OrderStatus.PENDING

    def test_deliver_requires_shipped(self, order):
        order.confirm()
        with pytest.raises(InvalidOrderStatusTransitionError):
            order.deliver()

    def test_confirm_twice(self, order):
        order.confirm()
        with pytest.raises(InvalidOrderStatusTransitionError):
            order.confirm()

    @pytest.mark.parametrize("steps", [[], ["confirm"], ["confirm", "ship"]])
    def test_cancel_from_non_terminal(self, order, steps):
        for step in steps:
            getattr(order, step)()

        order.cancel()

        assert order.status is OrderStatus.CANCELLED

    def test_cancel_delivered(self, order):
        order.confirm()
        order.ship()
        order.deliver()

        with pytest.raises(CannotCancelDeliveredOrderError) as exc_info:
            order.cancel()
        assert exc_info.value.message == "cannot cancel delivered order"
        assert order.status is OrderStatus.DELIVERED

    def test_cancel_cancelled(self, order):
        order.cancel()
        with pytest.raises(InvalidOrderStatusTransitionError):
            order.cancel()

    def test_soft_delete(self, order):
        order.mark_as_deleted()

        assert order.is_deleted()
        assert order.deleted_at == order.updated_at


def test_order_scenario():
    order = Order.create(user_id=42, items=[OrderItem.create(product_id=7, quantity=2, price=10.0)])
    assert order.total_amount == 20.0
    assert order.status is OrderStatus.PENDING

    order.add_item(product_id=9, quantity=1, price=5.0)
    assert order.total_amount == 25.0

    order.confirm()
    with pytest.raises(OrderNotModifiableError):
        order.add_item(product_id=3, quantity=1, price=1.0)
    assert order.total_amount == 25.0

    order.ship()
    order.cancel()
    assert order.status is OrderStatus.CANCELLED
