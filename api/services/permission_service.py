"""Permission services and role/form/permission aggregation.

Aggregations are recomputed from the join tables on every call:
- grouped permissions: role -> form -> permission names
- menu: role -> module -> form names
Groups and names keep first-seen order; duplicates are dropped.
"""

from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from models import RolFormPermission
from repositories.permission_repository import (
    PermissionRepository,
    RolFormPermissionRepository,
)
from repositories.rol_repository import RolRepository
from schemas import (
    FormPermissions,
    FormWithPermissions,
    ModuleWithForms,
    PermissionCreate,
    PermissionResponse,
    RolFormPermissionAssign,
    RolFormPermissionCreate,
    RolFormPermissionResponse,
    RolMenu,
    RolWithForms,
)
from services.base import EntityService, require_positive_id
from services.exceptions import NotFoundError, ValidationError

logger = get_logger(__name__)

permission_service = EntityService(
    entity_name="Permission",
    repository_class=PermissionRepository,
    response_schema=PermissionResponse,
    create_schema=PermissionCreate,
    required_fields=("name",),
    patch_fields=("name", "description"),
)

rol_form_permission_service = EntityService(
    entity_name="RolFormPermission",
    repository_class=RolFormPermissionRepository,
    response_schema=RolFormPermissionResponse,
    create_schema=RolFormPermissionCreate,
    reference_fields=("rol_id", "form_id", "permission_id"),
)


def _validate_assignment(
    data: RolFormPermissionAssign | None,
) -> RolFormPermissionAssign:
    if data is None:
        raise ValidationError("body", "Permission assignment data is required")
    require_positive_id(data.rol_id, "rol_id", "RolFormPermission")
    if not data.form_permissions:
        raise ValidationError(
            "form_permissions", "At least one form with permissions is required"
        )
    for item in data.form_permissions:
        require_positive_id(item.form_id, "form_id", "RolFormPermission")
        if not item.permission_ids:
            raise ValidationError(
                "permission_ids", f"Form {item.form_id} has no permission ids"
            )
        for permission_id in item.permission_ids:
            require_positive_id(permission_id, "permission_id", "RolFormPermission")
    return data


async def assign_permissions(
    db: AsyncSession, data: RolFormPermissionAssign | None
) -> int:
    """Grant each (form, permission) pair to a role.

    Triples that already exist, or repeat within the request, are skipped.
    All new rows are flushed together in the request transaction.

    Returns:
        Number of rows inserted.

    Raises:
        ValidationError: If the body or any id is invalid.
        NotFoundError: If the role does not exist.
    """
    data = _validate_assignment(data)

    with rol_form_permission_service.guard("assign"):
        rol = await RolRepository(db).get_by_id(data.rol_id)
    if rol is None:
        raise NotFoundError("Rol", data.rol_id)

    repository = RolFormPermissionRepository(db)
    with rol_form_permission_service.guard("assign"):
        seen = await repository.get_existing_triples(data.rol_id)

    rows: list[RolFormPermission] = []
    for item in data.form_permissions:
        for permission_id in item.permission_ids:
            triple = (data.rol_id, item.form_id, permission_id)
            if triple in seen:
                continue
            seen.add(triple)
            rows.append(
                RolFormPermission(
                    rol_id=data.rol_id,
                    form_id=item.form_id,
                    permission_id=permission_id,
                )
            )

    if rows:
        with rol_form_permission_service.guard("assign"):
            await repository.add_many(rows)

    logger.info(
        "rol.permissions.assigned",
        rol_id=data.rol_id,
        inserted=len(rows),
        requested=sum(len(item.permission_ids) for item in data.form_permissions),
    )
    return len(rows)


async def get_form_permissions_by_rol_id(
    db: AsyncSession, rol_id: int
) -> list[FormPermissions]:
    """Permission ids a role holds, grouped by form."""
    require_positive_id(rol_id, "rol_id", "RolFormPermission")

    with rol_form_permission_service.guard("get_by_rol_id"):
        rows = await RolFormPermissionRepository(db).get_by_rol_id(rol_id)

    grouped: dict[int, list[int]] = {}
    for row in rows:
        permission_ids = grouped.setdefault(row.form_id, [])
        if row.permission_id not in permission_ids:
            permission_ids.append(row.permission_id)

    return [
        FormPermissions(form_id=form_id, permission_ids=permission_ids)
        for form_id, permission_ids in grouped.items()
    ]


async def get_permissions_grouped_by_user(
    db: AsyncSession, user_id: int
) -> list[RolWithForms]:
    """Permission names per form per role for every active role of a user."""
    require_positive_id(user_id, "user_id", "User")

    with rol_form_permission_service.guard("get_grouped"):
        rows = await RolFormPermissionRepository(db).get_permission_rows_for_user(
            user_id
        )

    roles: dict[int, RolWithForms] = {}
    forms: dict[tuple[int, int], FormWithPermissions] = {}
    for row in rows:
        rol_group = roles.get(row.rol_id)
        if rol_group is None:
            rol_group = roles[row.rol_id] = RolWithForms(rol=row.rol)

        form_group = forms.get((row.rol_id, row.form_id))
        if form_group is None:
            form_group = forms[(row.rol_id, row.form_id)] = FormWithPermissions(
                name=row.form
            )
            rol_group.forms.append(form_group)

        if row.permission not in form_group.permissions:
            form_group.permissions.append(row.permission)

    return list(roles.values())


async def get_menu(db: AsyncSession, user_id: int) -> list[RolMenu]:
    """Navigation menu of a user: form names per module per active role."""
    require_positive_id(user_id, "user_id", "User")

    with rol_form_permission_service.guard("get_menu"):
        rows = await RolFormPermissionRepository(db).get_menu_rows_for_user(user_id)

    roles: dict[int, RolMenu] = {}
    modules: dict[tuple[int, int], ModuleWithForms] = {}
    for row in rows:
        rol_group = roles.get(row.rol_id)
        if rol_group is None:
            rol_group = roles[row.rol_id] = RolMenu(rol=row.rol)

        module_group = modules.get((row.rol_id, row.module_id))
        if module_group is None:
            module_group = modules[(row.rol_id, row.module_id)] = ModuleWithForms(
                module=row.module
            )
            rol_group.modules.append(module_group)

        if row.form not in module_group.forms:
            module_group.forms.append(row.form)

    return list(roles.values())
