"""
Mapper between the Order aggregate and OrderModel/OrderItemModel.
"""

import logging
from typing import Dict

from ....domain.order.entities import Order, OrderItem
from ....domain.order.value_objects import OrderStatus
from ..models import OrderModel, OrderItemModel
from .user_mapper import as_utc

logger = logging.getLogger("commerce-service.infrastructure.order_mapper")


class OrderMapper:
    """
    Mapper between the Order aggregate and its database models.

    Items are always mapped together with their order; the caller must load
    OrderModel.items eagerly.
    """

    def to_entity(self, model: OrderModel) -> Order:
        return Order(
            id=model.id,
            user_id=model.user_id,
            status=OrderStatus.from_string(model.status),
            items=[self.item_to_entity(item) for item in model.items],
            total_amount=model.total_amount,
            created_at=as_utc(model.created_at),
            updated_at=as_utc(model.updated_at),
            deleted_at=as_utc(model.deleted_at),
        )

    def item_to_entity(self, model: OrderItemModel) -> OrderItem:
        return OrderItem(
            id=model.id,
            order_id=model.order_id,
            product_id=model.product_id,
            quantity=model.quantity,
            price=model.price,
            created_at=as_utc(model.created_at),
        )

    def to_model(self, entity: Order) -> OrderModel:
        return OrderModel(
            user_id=entity.user_id,
            status=entity.status.value,
            total_amount=entity.total_amount,
            created_at=entity.created_at,
            updated_at=entity.updated_at,
            deleted_at=entity.deleted_at,
            items=[self.item_to_model(item) for item in entity.items],
        )

    def item_to_model(self, entity: OrderItem) -> OrderItemModel:
        return OrderItemModel(
            product_id=entity.product_id,
            quantity=entity.quantity,
            price=entity.price,
            created_at=entity.created_at,
        )

    def update_model(self, model: OrderModel, entity: Order) -> None:
        """
        Copy entity state onto an existing model.

        Items without an id are added, persisted items missing from the
        entity are removed (delete-orphan).
        """
        model.status = entity.status.value
        model.total_amount = entity.total_amount
        model.updated_at = entity.updated_at
        model.deleted_at = entity.deleted_at

        existing: Dict[int, OrderItemModel] = {item.id: item for item in model.items}
        kept_ids = {item.id for item in entity.items if item.id is not None}

        for item_id, item_model in existing.items():
            if item_id not in kept_ids:
                model.items.remove(item_model)
                logger.debug(f"Order {model.id}: item {item_id} removed")

        for item in entity.items:
            if item.id is None:
                model.items.append(self.item_to_model(item))

    def sync_item_ids(self, model: OrderModel, entity: Order) -> None:
        """
        Write generated ids back onto the entity after a flush.

        New items are appended in order, so they line up with the
        trailing unsaved entity items.
        """
        entity.id = model.id
        known_ids = {item.id for item in entity.items if item.id is not None}
        new_models = [item for item in model.items if item.id not in known_ids]
        new_items = [item for item in entity.items if item.id is None]
        for item, item_model in zip(new_items, new_models):
            item.id = item_model.id
        for item in entity.items:
            item.order_id = model.id
