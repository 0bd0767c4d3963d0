"""
Orders router.

Endpoints for placing orders, editing items of pending orders and moving
orders through their lifecycle.
"""

import logging
from typing import List, Optional

from fastapi import APIRouter, Response

from ..errors import to_http_exception
from ..schemas.order_schemas import (
    CreateOrderRequest,
    AddOrderItemRequest,
    ListOrdersResponse,
)
from ....application.dto import OrderDTO, OrderItemDTO
from ....application.queries import normalize_pagination
from ....application.use_cases import OrderItemRequest
from ....core.dependencies import OrderUseCaseDep, SettingsDep
from ....core.errors import CommerceServiceError

logger = logging.getLogger("commerce-service.api.orders")

router = APIRouter(tags=["orders"])


@router.post("", response_model=OrderDTO, status_code=201)
async def create_order(request: CreateOrderRequest, use_case: OrderUseCaseDep) -> OrderDTO:
    """
    Place a new pending order.

    Raises:
        HTTPException 400: If user_id is invalid, items are empty or out of range
        HTTPException 404: If the user does not exist
    """
    try:
        order = await use_case.create_order(
            request.user_id,
            [
                OrderItemRequest(
                    product_id=item.product_id,
                    quantity=item.quantity,
                    price=item.price
                )
                for item in request.items
            ]
        )
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.get("", response_model=ListOrdersResponse)
async def list_orders(
    use_case: OrderUseCaseDep,
    app_settings: SettingsDep,
    user_id: Optional[int] = None,
    limit: int = 0,
    offset: int = 0
) -> ListOrdersResponse:
    """List live orders, optionally only those of one user."""
    limit, offset = normalize_pagination(
        limit, offset, app_settings.default_page_size, app_settings.max_page_size
    )
    try:
        if user_id is not None:
            orders = await use_case.get_user_orders(user_id, limit, offset)
        else:
            orders = await use_case.list_orders(limit, offset)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e

    return ListOrdersResponse(
        orders=[OrderDTO.from_entity(order) for order in orders],
        limit=limit,
        offset=offset,
        count=len(orders)
    )


@router.get("/{order_id}", response_model=OrderDTO)
async def get_order(order_id: int, use_case: OrderUseCaseDep) -> OrderDTO:
    try:
        order = await use_case.get_order(order_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.put("/{order_id}/confirm", response_model=OrderDTO)
async def confirm_order(order_id: int, use_case: OrderUseCaseDep) -> OrderDTO:
    try:
        order = await use_case.confirm_order(order_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.put("/{order_id}/ship", response_model=OrderDTO)
async def ship_order(order_id: int, use_case: OrderUseCaseDep) -> OrderDTO:
    try:
        order = await use_case.ship_order(order_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.put("/{order_id}/deliver", response_model=OrderDTO)
async def deliver_order(order_id: int, use_case: OrderUseCaseDep) -> OrderDTO:
    try:
        order = await use_case.deliver_order(order_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.put("/{order_id}/cancel", response_model=OrderDTO)
async def cancel_order(order_id: int, use_case: OrderUseCaseDep) -> OrderDTO:
    """
    Raises:
        HTTPException 409: If the order is delivered or already cancelled
    """
    try:
        order = await use_case.cancel_order(order_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.get("/{order_id}/items", response_model=List[OrderItemDTO])
async def get_order_items(order_id: int, use_case: OrderUseCaseDep) -> List[OrderItemDTO]:
    try:
        items = await use_case.get_order_items(order_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return [OrderItemDTO.from_entity(item) for item in items]


@router.post("/{order_id}/items", response_model=OrderDTO, status_code=201)
async def add_order_item(
    order_id: int,
    request: AddOrderItemRequest,
    use_case: OrderUseCaseDep
) -> OrderDTO:
    """
    Raises:
        HTTPException 400: If quantity or price is out of range
        HTTPException 409: If the order is no longer pending
    """
    try:
        order = await use_case.add_item(
            order_id,
            product_id=request.product_id,
            quantity=request.quantity,
            price=request.price
        )
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.delete("/{order_id}/items/{item_id}", response_model=OrderDTO)
async def remove_order_item(order_id: int, item_id: int, use_case: OrderUseCaseDep) -> OrderDTO:
    try:
        order = await use_case.remove_item(order_id, item_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return OrderDTO.from_entity(order)


@router.delete("/{order_id}", status_code=204)
async def delete_order(order_id: int, use_case: OrderUseCaseDep) -> Response:
    try:
        await use_case.delete_order(order_id)
    except CommerceServiceError as e:
        raise to_http_exception(e) from e
    return Response(status_code=204)
