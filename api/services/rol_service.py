"""Role and user-role services."""

from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from repositories.person_repository import UserRepository
from repositories.rol_repository import RolRepository, UserRolRepository
from schemas import (
    RolCreate,
    RolResponse,
    UserRolAssign,
    UserRolCreate,
    UserRolResponse,
)
from services.base import EntityService, require_positive_id
from services.exceptions import NotFoundError, ValidationError

logger = get_logger(__name__)

rol_service = EntityService(
    entity_name="Rol",
    repository_class=RolRepository,
    response_schema=RolResponse,
    create_schema=RolCreate,
    required_fields=("type_rol",),
    patch_fields=("type_rol", "description"),
)

user_rol_service = EntityService(
    entity_name="UserRol",
    repository_class=UserRolRepository,
    response_schema=UserRolResponse,
    create_schema=UserRolCreate,
    reference_fields=("user_id", "rol_id"),
    patch_fields=("user_id", "rol_id"),
)


async def get_roles_by_user_id(db: AsyncSession, user_id: int) -> list[RolResponse]:
    """Active roles assigned to a user."""
    require_positive_id(user_id, "user_id", "User")
    with rol_service.guard("get_by_user_id"):
        roles = await RolRepository(db).get_by_user_id(user_id)
    return [rol_service.to_response(rol) for rol in roles]


async def get_user_roles(db: AsyncSession, user_id: int) -> list[UserRolResponse]:
    """UserRol links of a user."""
    require_positive_id(user_id, "user_id", "User")
    with user_rol_service.guard("get_by_user_id"):
        rows = await UserRolRepository(db).get_by_user_id(user_id)
    return [user_rol_service.to_response(row) for row in rows]


async def assign_roles(
    db: AsyncSession, data: UserRolAssign | None
) -> list[UserRolResponse]:
    """Replace every role of a user with the given role ids.

    Duplicate role ids are collapsed. Unknown users or roles raise NotFoundError.
    """
    if data is None:
        raise ValidationError("body", "UserRol assignment data is required")
    require_positive_id(data.user_id, "user_id", "UserRol")
    if not data.rol_ids:
        raise ValidationError("rol_ids", "At least one rol id is required")
    for rol_id in data.rol_ids:
        require_positive_id(rol_id, "rol_ids", "UserRol")

    rol_ids = list(dict.fromkeys(data.rol_ids))

    with user_rol_service.guard("assign"):
        user = await UserRepository(db).get_by_id(data.user_id)
    if user is None:
        raise NotFoundError("User", data.user_id)

    rol_repository = RolRepository(db)
    for rol_id in rol_ids:
        with rol_service.guard("get", rol_id):
            rol = await rol_repository.get_by_id(rol_id)
        if rol is None:
            raise NotFoundError("Rol", rol_id)

    with user_rol_service.guard("assign"):
        rows = await UserRolRepository(db).replace_for_user(data.user_id, rol_ids)

    logger.info("user_rol.assigned", user_id=data.user_id, rol_ids=rol_ids)
    return [user_rol_service.to_response(row) for row in rows]
