"""Permission repositories, including the role/form/permission aggregation queries."""

from collections.abc import Sequence
from typing import NamedTuple

from sqlalchemy import select

from models import Form, FormModule, Module, Permission, Rol, RolFormPermission, UserRol
from repositories.base import BaseRepository
from repositories.utils import log_query


class PermissionRow(NamedTuple):
    """One (role, form, permission) grant reachable from a user."""

    rol_id: int
    rol: str
    form_id: int
    form: str
    permission: str


class MenuRow(NamedTuple):
    """One (role, module, form) menu entry reachable from a user."""

    rol_id: int
    rol: str
    module_id: int
    module: str
    form: str


class PermissionRepository(BaseRepository[Permission]):
    model = Permission

    @log_query("Permission.get_by_name")
    async def get_by_name(self, name: str) -> Permission | None:
        result = await self.db.execute(
            select(Permission).where(Permission.name == name)
        )
        return result.scalar_one_or_none()


class RolFormPermissionRepository(BaseRepository[RolFormPermission]):
    model = RolFormPermission

    @log_query("RolFormPermission.get_by_rol_id")
    async def get_by_rol_id(self, rol_id: int) -> list[RolFormPermission]:
        result = await self.db.execute(
            select(RolFormPermission)
            .where(RolFormPermission.rol_id == rol_id)
            .order_by(RolFormPermission.form_id, RolFormPermission.id)
        )
        return list(result.scalars().all())

    @log_query("RolFormPermission.get_existing_triples")
    async def get_existing_triples(self, rol_id: int) -> set[tuple[int, int, int]]:
        result = await self.db.execute(
            select(
                RolFormPermission.rol_id,
                RolFormPermission.form_id,
                RolFormPermission.permission_id,
            ).where(RolFormPermission.rol_id == rol_id)
        )
        return {(row.rol_id, row.form_id, row.permission_id) for row in result}

    @log_query("RolFormPermission.add_many")
    async def add_many(
        self, rows: Sequence[RolFormPermission]
    ) -> list[RolFormPermission]:
        """Insert every row in a single flush."""
        self.db.add_all(rows)
        await self.db.flush()
        return list(rows)

    @log_query("RolFormPermission.get_permission_rows_for_user")
    async def get_permission_rows_for_user(self, user_id: int) -> list[PermissionRow]:
        """Grants of a user's active roles on active forms, in role/form/grant order."""
        result = await self.db.execute(
            select(
                Rol.id.label("rol_id"),
                Rol.type_rol.label("rol"),
                Form.id.label("form_id"),
                Form.name.label("form"),
                Permission.name.label("permission"),
            )
            .select_from(UserRol)
            .join(Rol, Rol.id == UserRol.rol_id)
            .join(RolFormPermission, RolFormPermission.rol_id == Rol.id)
            .join(Form, Form.id == RolFormPermission.form_id)
            .join(Permission, Permission.id == RolFormPermission.permission_id)
            .where(
                UserRol.user_id == user_id,
                Rol.active.is_(True),
                Form.active.is_(True),
            )
            .order_by(Rol.id, Form.id, RolFormPermission.id)
        )
        return [PermissionRow(*row) for row in result.all()]

    @log_query("RolFormPermission.get_menu_rows_for_user")
    async def get_menu_rows_for_user(self, user_id: int) -> list[MenuRow]:
        """Forms reachable by a user, grouped under their active modules."""
        result = await self.db.execute(
            select(
                Rol.id.label("rol_id"),
                Rol.type_rol.label("rol"),
                Module.id.label("module_id"),
                Module.name.label("module"),
                Form.name.label("form"),
            )
            .select_from(UserRol)
            .join(Rol, Rol.id == UserRol.rol_id)
            .join(RolFormPermission, RolFormPermission.rol_id == Rol.id)
            .join(Form, Form.id == RolFormPermission.form_id)
            .join(FormModule, FormModule.form_id == Form.id)
            .join(Module, Module.id == FormModule.module_id)
            .where(
                UserRol.user_id == user_id,
                Rol.active.is_(True),
                Form.active.is_(True),
                Module.active.is_(True),
            )
            .order_by(Rol.id, Module.id, Form.id)
        )
        return [MenuRow(*row) for row in result.all()]
