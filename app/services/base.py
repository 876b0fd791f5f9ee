"""
Generic service base.
Shared lookup and persistence for the top-level entities.
"""

import logging
from typing import Generic, Type, TypeVar

from fastapi import status
from sqlalchemy import select
from sqlalchemy.exc import IntegrityError, SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.core.exceptions import ConflictError, NotFoundError, StoreError
from app.models.base import EntityModel


logger = logging.getLogger(__name__)

ModelType = TypeVar("ModelType", bound=EntityModel)


class BaseService(Generic[ModelType]):
    """
    Base class for entity services.

    Usage:
        class ClientService(BaseService[Client]):
            model = Client
    """

    model: Type[ModelType]
    not_found_detail: str = "Resource does not exist"
    not_found_status: int = status.HTTP_404_NOT_FOUND
    conflict_detail: str = "Resource already exists"

    def __init__(self, db: AsyncSession):
        self.db = db

    async def get_by_id(self, entity_id: int) -> ModelType | None:
        """Get entity by ID."""
        result = await self.db.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    async def get_or_404(self, entity_id: int) -> ModelType:
        """
        Get entity by ID or raise NotFoundError.

        Raises:
            NotFoundError: If no entity has this ID
        """
        entity = await self.get_by_id(entity_id)
        if entity is None:
            raise NotFoundError(self.not_found_detail, self.not_found_status)
        return entity

    async def get_all(self) -> list[ModelType]:
        """List all entities in insertion order."""
        result = await self.db.execute(select(self.model).order_by(self.model.id))
        return list(result.scalars().all())

    async def save(self, entity: ModelType) -> ModelType:
        """
        Flush pending changes of ``entity`` and reload it.

        Raises:
            ConflictError: If a unique column is violated
            StoreError: On any other database failure
        """
        try:
            await self.db.flush()
            await self.db.refresh(entity)
        except IntegrityError as exc:
            await self.db.rollback()
            logger.warning("Unique constraint violated: %s", exc.orig)
            raise ConflictError(self.conflict_detail) from exc
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.exception("Database write failed")
            raise StoreError() from exc
        return entity

    async def remove(self, entity: ModelType) -> None:
        """Delete entity."""
        try:
            await self.db.delete(entity)
            await self.db.flush()
        except SQLAlchemyError as exc:
            await self.db.rollback()
            logger.exception("Database delete failed")
            raise StoreError() from exc
