"""Generic repository shared by every entity.

Concrete repositories bind ``model`` and add entity-specific queries:

    class CenterRepository(BaseRepository[Center]):
        model = Center
"""

from collections.abc import Mapping
from typing import Any, ClassVar

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from core.database import Base
from repositories.utils import log_query


class BaseRepository[ModelT: Base]:
    """CRUD operations for one mapped model.

    Does NOT commit. The request-scoped session owns the transaction.
    """

    model: ClassVar[type[Any]]

    def __init__(self, db: AsyncSession):
        self.db = db

    @property
    def has_active_flag(self) -> bool:
        return hasattr(self.model, "active")

    @log_query("{entity}.get_all")
    async def get_all(self, *, active_only: bool = False) -> list[ModelT]:
        """List rows ordered by id, optionally only the active ones."""
        query = select(self.model).order_by(self.model.id)
        if active_only and self.has_active_flag:
            query = query.where(self.model.active.is_(True))
        result = await self.db.execute(query)
        return list(result.scalars().all())

    @log_query("{entity}.get_by_id")
    async def get_by_id(self, entity_id: int) -> ModelT | None:
        result = await self.db.execute(
            select(self.model).where(self.model.id == entity_id)
        )
        return result.scalar_one_or_none()

    @log_query("{entity}.create")
    async def create(self, entity: ModelT) -> ModelT:
        """Persist a new row and return it with its generated id."""
        self.db.add(entity)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    @log_query("{entity}.update")
    async def update(self, entity: ModelT, values: Mapping[str, Any]) -> ModelT:
        """Apply column values to an existing row."""
        for field, value in values.items():
            setattr(entity, field, value)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity

    @log_query("{entity}.delete")
    async def delete(self, entity: ModelT) -> None:
        await self.db.delete(entity)
        await self.db.flush()

    @log_query("{entity}.set_active")
    async def set_active(
        self, entity: ModelT, active: bool, *, extra: Mapping[str, Any] | None = None
    ) -> ModelT:
        """Flip the active flag, plus any bookkeeping columns in ``extra``."""
        entity.active = active
        for field, value in (extra or {}).items():
            setattr(entity, field, value)
        await self.db.flush()
        await self.db.refresh(entity)
        return entity
