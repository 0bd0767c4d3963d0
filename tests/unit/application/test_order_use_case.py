"""
Unit tests for OrderUseCase.
"""

import pytest
from unittest.mock import AsyncMock

from commerce_service.application.use_cases import OrderItemRequest, OrderUseCase
from commerce_service.core.errors import (
    EmptyOrderError,
    InvalidOrderItemError,
    OrderNotFoundError,
    OrderNotModifiableError,
    UserNotFoundError,
)
from commerce_service.domain.order import Order, OrderItem, OrderStatus
from commerce_service.domain.user import User


@pytest.fixture
def order_repository():
    repository = AsyncMock()

    async def assign_ids(order):
        order.id = 10
        for index, item in enumerate(order.items, start=1):
            item.id = index
            item.order_id = order.id
        return order

    repository.create.side_effect = assign_ids
    repository.update.side_effect = lambda order: order
    return repository


@pytest.fixture
def user_repository():
    repository = AsyncMock()
    user = User.create(email="john@example.com", name="John", password="hash")
    user.id = 42
    repository.get_by_id.return_value = user
    return repository


@pytest.fixture
def use_case(order_repository, user_repository):
    return OrderUseCase(order_repository, user_repository)


@pytest.fixture
def stored_order():
    order = Order.create(
        user_id=42,
        items=[OrderItem.create(product_id=1, quantity=2, price=10.0)]
    )
    order.id = 10
    order.items[0].id = 1
    return order


class TestCreateOrder:

    @pytest.mark.asyncio
    async def test_create(self, use_case, order_repository, user_repository):
        order = await use_case.create_order(
            42,
            [OrderItemRequest(product_id=1, quantity=2, price=10.0),
             OrderItemRequest(product_id=2, quantity=1, price=3.0)]
        )

        assert order.id == 10
        assert order.status is OrderStatus.PENDING
        assert order.total_amount == 23.0
        user_repository.get_by_id.assert_awaited_once_with(42)
        order_repository.create.assert_awaited_once()

    @pytest.mark.asyncio
    async def test_unknown_user(self, use_case, order_repository, user_repository):
        user_repository.get_by_id.side_effect = UserNotFoundError()

        with pytest.raises(UserNotFoundError):
            await use_case.create_order(42, [OrderItemRequest(1, 1, 1.0)])
        order_repository.create.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_empty_items_rejected_before_user_lookup(self, use_case, user_repository):
        with pytest.raises(EmptyOrderError):
            await use_case.create_order(42, [])
        user_repository.get_by_id.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_invalid_item(self, use_case):
        with pytest.raises(InvalidOrderItemError):
            await use_case.create_order(42, [OrderItemRequest(1, 0, 1.0)])


class TestOrderMutations:

    @pytest.mark.asyncio
    async def test_add_item(self, use_case, order_repository, stored_order):
        order_repository.get_by_id.return_value = stored_order

        order = await use_case.add_item(10, product_id=5, quantity=3, price=1.5)

        assert len(order.items) == 2
        assert order.total_amount == 24.5
        order_repository.update.assert_awaited_once_with(stored_order)

    @pytest.mark.asyncio
    async def test_remove_item(self, use_case, order_repository, stored_order):
        order_repository.get_by_id.return_value = stored_order

        order = await use_case.remove_item(10, 1)

        assert order.items == []
        assert order.total_amount == 0.0

    @pytest.mark.asyncio
    async def test_lifecycle(self, use_case, order_repository, stored_order):
        order_repository.get_by_id.return_value = stored_order

        await use_case.confirm_order(10)
        await use_case.ship_order(10)
        order = await use_case.deliver_order(10)

        assert order.status is OrderStatus.DELIVERED
        assert order_repository.update.await_count == 3

    @pytest.mark.asyncio
    async def test_rule_violation_skips_update(self, use_case, order_repository, stored_order):
        stored_order.confirm()
        order_repository.get_by_id.return_value = stored_order

        with pytest.raises(OrderNotModifiableError):
            await use_case.add_item(10, product_id=5, quantity=1, price=1.0)
        order_repository.update.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_missing_order(self, use_case, order_repository):
        order_repository.get_by_id.side_effect = OrderNotFoundError()

        with pytest.raises(OrderNotFoundError):
            await use_case.cancel_order(99)

    @pytest.mark.asyncio
    async def test_delete(self, use_case, order_repository):
        await use_case.delete_order(10)
        order_repository.delete.assert_awaited_once_with(10)


class TestOrderQueries:

    @pytest.mark.asyncio
    async def test_get_order_items(self, use_case, order_repository, stored_order):
        order_repository.get_by_id.return_value = stored_order

        items = await use_case.get_order_items(10)

        assert [item.product_id for item in items] == [1]

    @pytest.mark.asyncio
    async def test_get_user_orders(self, use_case, order_repository, stored_order):
        order_repository.get_by_user_id.return_value = [stored_order]

        orders = await use_case.get_user_orders(42, 10, 0)

        assert orders == [stored_order]
        order_repository.get_by_user_id.assert_awaited_once_with(42, 10, 0)
