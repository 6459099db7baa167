"""Tests for role lookups and user-role replacement."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from schemas import UserRolAssign
from services.exceptions import NotFoundError, ValidationError
from services.rol_service import assign_roles, get_roles_by_user_id, get_user_roles
from tests.factories import (
    RolFactory,
    UserFactory,
    UserRolFactory,
    create_async,
    create_batch_async,
)

pytestmark = pytest.mark.integration


class TestGetRolesByUserId:
    async def test_returns_active_roles(self, db_session: AsyncSession):
        user = await create_async(UserFactory, db_session)
        admin = await create_async(RolFactory, db_session, type_rol="Admin")
        await create_async(UserRolFactory, db_session, user_id=user.id, rol_id=admin.id)

        result = await get_roles_by_user_id(db_session, user.id)

        assert [r.type_rol for r in result] == ["Admin"]

    async def test_rejects_zero(self, db_session: AsyncSession):
        with pytest.raises(ValidationError):
            await get_roles_by_user_id(db_session, 0)


class TestAssignRoles:
    async def test_replaces_previous_roles(self, db_session: AsyncSession):
        user = await create_async(UserFactory, db_session)
        old, new = await create_batch_async(RolFactory, db_session, 2)
        await create_async(UserRolFactory, db_session, user_id=user.id, rol_id=old.id)

        result = await assign_roles(
            db_session, UserRolAssign(user_id=user.id, rol_ids=[new.id, new.id])
        )

        assert [r.rol_id for r in result] == [new.id]
        links = await get_user_roles(db_session, user.id)
        assert [link.rol_id for link in links] == [new.id]

    async def test_unknown_user(self, db_session: AsyncSession):
        rol = await create_async(RolFactory, db_session)

        with pytest.raises(NotFoundError) as exc_info:
            await assign_roles(db_session, UserRolAssign(user_id=404, rol_ids=[rol.id]))

        assert exc_info.value.entity == "User"

    async def test_unknown_rol_keeps_existing_links(self, db_session: AsyncSession):
        user = await create_async(UserFactory, db_session)
        rol = await create_async(RolFactory, db_session)
        await create_async(UserRolFactory, db_session, user_id=user.id, rol_id=rol.id)

        with pytest.raises(NotFoundError):
            await assign_roles(
                db_session, UserRolAssign(user_id=user.id, rol_ids=[rol.id, 999])
            )

        links = await get_user_roles(db_session, user.id)
        assert [link.rol_id for link in links] == [rol.id]

    @pytest.mark.parametrize(
        "body",
        [
            None,
            UserRolAssign(user_id=0, rol_ids=[1]),
            UserRolAssign(user_id=1, rol_ids=[]),
            UserRolAssign(user_id=1, rol_ids=[1, 0]),
        ],
    )
    async def test_invalid_body(self, db_session: AsyncSession, body):
        with pytest.raises(ValidationError):
            await assign_roles(db_session, body)
