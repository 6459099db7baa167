"""Change log repository (append-only)."""

from sqlalchemy import select

from models import ChangeLog
from repositories.base import BaseRepository
from repositories.utils import log_query


class ChangeLogRepository(BaseRepository[ChangeLog]):
    model = ChangeLog

    @log_query("ChangeLog.get_all")
    async def get_all(self, *, active_only: bool = False) -> list[ChangeLog]:
        """Newest entries first."""
        result = await self.db.execute(
            select(ChangeLog).order_by(
                ChangeLog.change_date.desc(), ChangeLog.id.desc()
            )
        )
        return list(result.scalars().all())
