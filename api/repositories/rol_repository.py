"""Role and user-role repositories."""

from collections.abc import Iterable

from sqlalchemy import delete, select

from models import Rol, UserRol
from repositories.base import BaseRepository
from repositories.utils import log_query


class RolRepository(BaseRepository[Rol]):
    model = Rol

    @log_query("Rol.get_by_user_id")
    async def get_by_user_id(self, user_id: int) -> list[Rol]:
        """Active roles linked to a user through UserRol."""
        result = await self.db.execute(
            select(Rol)
            .join(UserRol, UserRol.rol_id == Rol.id)
            .where(UserRol.user_id == user_id, Rol.active.is_(True))
            .order_by(Rol.id)
        )
        return list(result.scalars().unique().all())


class UserRolRepository(BaseRepository[UserRol]):
    model = UserRol

    @log_query("UserRol.get_by_user_id")
    async def get_by_user_id(self, user_id: int) -> list[UserRol]:
        result = await self.db.execute(
            select(UserRol).where(UserRol.user_id == user_id).order_by(UserRol.id)
        )
        return list(result.scalars().all())

    @log_query("UserRol.replace_for_user")
    async def replace_for_user(
        self, user_id: int, rol_ids: Iterable[int]
    ) -> list[UserRol]:
        """Delete every role link of ``user_id`` and insert one per rol id."""
        await self.db.execute(delete(UserRol).where(UserRol.user_id == user_id))
        rows = [UserRol(user_id=user_id, rol_id=rol_id) for rol_id in rol_ids]
        self.db.add_all(rows)
        await self.db.flush()
        return rows
