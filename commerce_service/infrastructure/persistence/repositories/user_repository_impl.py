"""
SQLAlchemy implementation of UserRepository.
"""

import logging
from typing import List

from sqlalchemy import select, func
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from ....core.errors import UserNotFoundError, EmailExistsError, RepositoryError
from ....domain.user.entities import User
from ....domain.user.repositories import UserRepository
from ..models import UserModel
from ..mappers import UserMapper

logger = logging.getLogger("commerce-service.infrastructure.user_repository")


class UserRepositoryImpl(UserRepository):
    """
    User repository backed by SQLAlchemy.

    Writes are flushed, not committed; the request-scoped session owns the
    transaction.

    Attributes:
        _db: SQLAlchemy session
        _mapper: Entity/model mapper

    Example:
        >>> repo = UserRepositoryImpl(db_session)
        >>> user = await repo.get_by_email("john@example.com")
    """

    def __init__(self, db: AsyncSession):
        self._db = db
        self._mapper = UserMapper()

    async def create(self, entity: User) -> User:
        """
        Insert a new user and assign its id.

        Raises:
            EmailExistsError: If the email is already stored
        """
        model = self._mapper.to_model(entity)
        self._db.add(model)
        await self._flush(entity.email)

        entity.id = model.id
        logger.debug(f"User {entity.id} inserted")
        return entity

    async def get_by_id(self, id: int, include_deleted: bool = False) -> User:
        model = await self._get_model(id, include_deleted=include_deleted)
        return self._mapper.to_entity(model)

    async def get_by_email(self, email: str) -> User:
        result = await self._db.execute(
            select(UserModel).where(
                UserModel.email == email,
                UserModel.deleted_at.is_(None)
            )
        )
        model = result.scalar_one_or_none()

        if not model:
            logger.debug(f"User with email {email} not found")
            raise UserNotFoundError(details={"email": email})

        return self._mapper.to_entity(model)

    async def get_all(self, limit: int, offset: int) -> List[User]:
        result = await self._db.execute(
            select(UserModel)
            .where(UserModel.deleted_at.is_(None))
            .order_by(UserModel.id.asc())
            .limit(limit)
            .offset(offset)
        )
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def update(self, entity: User) -> User:
        """
        Persist changes of a user, including a restore of a deleted one.

        Raises:
            UserNotFoundError: If the user row does not exist
            EmailExistsError: If the new email belongs to another user
        """
        model = await self._get_model(entity.id, include_deleted=True)
        self._mapper.update_model(model, entity)
        await self._flush(entity.email)

        logger.debug(f"User {entity.id} updated")
        return entity

    async def delete(self, id: int) -> None:
        """
        Soft delete a live user.

        Raises:
            UserNotFoundError: If the user does not exist or is already deleted
        """
        model = await self._get_model(id)
        entity = self._mapper.to_entity(model)

        entity.mark_as_deleted()

        self._mapper.update_model(model, entity)
        await self._db.flush()
        logger.debug(f"User {id} soft deleted")

    async def count(self) -> int:
        result = await self._db.execute(
            select(func.count(UserModel.id)).where(UserModel.deleted_at.is_(None))
        )
        return result.scalar() or 0

    async def count_deleted(self) -> int:
        result = await self._db.execute(
            select(func.count(UserModel.id)).where(UserModel.deleted_at.is_not(None))
        )
        return result.scalar() or 0

    async def get_users_by_email_domain(self, domain: str) -> List[User]:
        suffix = "@" + domain.lstrip("@")
        result = await self._db.execute(
            select(UserModel)
            .where(
                UserModel.email.endswith(suffix, autoescape=True),
                UserModel.deleted_at.is_(None)
            )
            .order_by(UserModel.id.asc())
        )
        users = [self._mapper.to_entity(model) for model in result.scalars().all()]
        logger.debug(f"Found {len(users)} users in domain {domain}")
        return users

    async def get_active_users(self) -> List[User]:
        result = await self._db.execute(
            select(UserModel)
            .where(UserModel.deleted_at.is_(None))
            .order_by(UserModel.id.asc())
        )
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def get_users_with_filters(
        self,
        limit: int,
        offset: int,
        email: str = "",
        name: str = ""
    ) -> List[User]:
        stmt = select(UserModel).where(UserModel.deleted_at.is_(None))
        if email:
            stmt = stmt.where(UserModel.email.contains(email, autoescape=True))
        if name:
            stmt = stmt.where(UserModel.name.contains(name, autoescape=True))

        result = await self._db.execute(
            stmt.order_by(UserModel.id.asc()).limit(limit).offset(offset)
        )
        return [self._mapper.to_entity(model) for model in result.scalars().all()]

    async def _get_model(self, id: int, include_deleted: bool = False) -> UserModel:
        stmt = select(UserModel).where(UserModel.id == id)
        if not include_deleted:
            stmt = stmt.where(UserModel.deleted_at.is_(None))

        result = await self._db.execute(stmt)
        model = result.scalar_one_or_none()

        if not model:
            logger.debug(f"User {id} not found")
            raise UserNotFoundError(details={"user_id": id})
        return model

    async def _flush(self, email: str) -> None:
        try:
            await self._db.flush()
        except IntegrityError as e:
            await self._db.rollback()
            if "email" in str(e.orig).lower():
                raise EmailExistsError(details={"email": email}) from e
            raise RepositoryError(
                operation="flush",
                entity="User",
                reason=str(e.orig)
            ) from e
