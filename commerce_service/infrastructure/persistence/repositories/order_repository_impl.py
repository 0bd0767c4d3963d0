"""
SQLAlchemy implementation of OrderRepository.
"""

import logging
from typing import List

from sqlalchemy import select, func
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from ....core.errors import OrderNotFoundError
from ....domain.order.entities import Order
from ....domain.order.repositories import OrderRepository
from ..models import OrderModel
from ..mappers import OrderMapper

logger = logging.getLogger("commerce-service.infrastructure.order_repository")


class OrderRepositoryImpl(OrderRepository):
    """
    Order repository backed by SQLAlchemy.

    Orders are always loaded together with their items.

    Example:
        >>> repo = OrderRepositoryImpl(db_session)
        >>> orders = await repo.get_by_user_id(42, limit=10, offset=0)
    """

    def __init__(self, db: AsyncSession):
        self._db = db
        self._mapper = OrderMapper()

    async def create(self, entity: Order) -> Order:
        """Insert an order with its items and assign all ids."""
        model = self._mapper.to_model(entity)
        self._db.add(model)
        await self._db.flush()

        self._mapper.sync_item_ids(model, entity)
        logger.debug(f"Order {entity.id} inserted with {len(entity.items)} items")
        return entity

    async def get_by_id(self, id: int) -> Order:
        """
        Raises:
            OrderNotFoundError: If the order does not exist or is deleted
        """
        model = await self._get_model(id)
        return self._mapper.to_entity(model)

    async def get_by_user_id(self, user_id: int, limit: int, offset: int) -> List[Order]:
        result = await self._db.execute(
            self._live_orders()
            .where(OrderModel.user_id == user_id)
            .order_by(OrderModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def get_all(self, limit: int, offset: int) -> List[Order]:
        result = await self._db.execute(
            self._live_orders()
            .order_by(OrderModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def update(self, entity: Order) -> Order:
        """
        Persist status, total and item changes of an order.

        Raises:
            OrderNotFoundError: If the order does not exist or is deleted
        """
        model = await self._get_model(entity.id)
        self._mapper.update_model(model, entity)
        await self._db.flush()

        self._mapper.sync_item_ids(model, entity)
        logger.debug(f"Order {entity.id} updated (status={entity.status.value})")
        return entity

    async def delete(self, id: int) -> None:
        """
        Soft delete a live order.

        Raises:
            OrderNotFoundError: If the order does not exist or is already deleted
        """
        model = await self._get_model(id)
        entity = self._mapper.to_entity(model)

        entity.mark_as_deleted()

        self._mapper.update_model(model, entity)
        await self._db.flush()
        logger.debug(f"Order {id} soft deleted")

    async def count(self) -> int:
        result = await self._db.execute(
            select(func.count(OrderModel.id)).where(OrderModel.deleted_at.is_(None))
        )
        return result.scalar() or 0

    def _live_orders(self):
        return (
            select(OrderModel)
            .options(selectinload(OrderModel.items))
            .where(OrderModel.deleted_at.is_(None))
        )

    async def _get_model(self, id: int) -> OrderModel:
        result = await self._db.execute(
            self._live_orders().where(OrderModel.id == id)
        )
        model = result.scalar_one_or_none()

        if not model:
            logger.debug(f"Order {id} not found")
            raise OrderNotFoundError(details={"order_id": id})
        return model
