"""People, users, roles, permissions, forms and modules endpoints.

Besides the standard CRUD surface, this module exposes the role/permission
aggregation endpoints. Route ordering note: the extra endpoints use literal
prefixes (/assign, /rol/, /grouped/, /menu/, /user/, /document/) that cannot
collide with "/{entity_id}".
"""

from fastapi import APIRouter, Request

from core.database import DbSession
from core.ratelimit import API_LIMIT, WRITE_LIMIT, limiter
from routes.crud import INVALID, NOT_FOUND, build_crud_router
from schemas import (
    AssignResult,
    FormModuleUpdate,
    FormPatch,
    FormPermissions,
    FormUpdate,
    ModulePatch,
    ModuleUpdate,
    PermissionPatch,
    PermissionUpdate,
    PersonPatch,
    PersonResponse,
    PersonUpdate,
    RolFormPermissionAssign,
    RolFormPermissionUpdate,
    RolMenu,
    RolPatch,
    RolResponse,
    RolUpdate,
    RolWithForms,
    UserRolAssign,
    UserRolPatch,
    UserRolResponse,
    UserRolUpdate,
    UserUpdate,
)
from services.form_service import form_module_service, form_service, module_service
from services.permission_service import (
    assign_permissions,
    get_form_permissions_by_rol_id,
    get_menu,
    get_permissions_grouped_by_user,
    permission_service,
    rol_form_permission_service,
)
from services.person_service import (
    get_person_by_document,
    person_service,
    user_service,
)
from services.rol_service import (
    assign_roles,
    get_roles_by_user_id,
    get_user_roles,
    rol_service,
    user_rol_service,
)

person_router = build_crud_router(
    person_service, path="Person", update_schema=PersonUpdate, patch_schema=PersonPatch
)
user_router = build_crud_router(user_service, path="User", update_schema=UserUpdate)
rol_router = build_crud_router(
    rol_service, path="Rol", update_schema=RolUpdate, patch_schema=RolPatch
)
permission_router = build_crud_router(
    permission_service,
    path="Permission",
    update_schema=PermissionUpdate,
    patch_schema=PermissionPatch,
)
form_router = build_crud_router(
    form_service, path="Form", update_schema=FormUpdate, patch_schema=FormPatch
)
module_router = build_crud_router(
    module_service, path="Module", update_schema=ModuleUpdate, patch_schema=ModulePatch
)
form_module_router = build_crud_router(
    form_module_service, path="FormModule", update_schema=FormModuleUpdate
)
rol_form_permission_router = build_crud_router(
    rol_form_permission_service,
    path="RolFormPermission",
    update_schema=RolFormPermissionUpdate,
)
user_rol_router = build_crud_router(
    user_rol_service,
    path="UserRol",
    update_schema=UserRolUpdate,
    patch_schema=UserRolPatch,
)


@person_router.get(
    "/document/{number_identification}",
    response_model=PersonResponse,
    responses={**NOT_FOUND, **INVALID},
)
@limiter.limit(API_LIMIT)
async def get_person_by_document_endpoint(
    request: Request, number_identification: str, db: DbSession
) -> PersonResponse:
    """Find a person by identification number."""
    return await get_person_by_document(db, number_identification)


@rol_router.get(
    "/user/{user_id}",
    response_model=list[RolResponse],
    responses=INVALID,
)
@limiter.limit(API_LIMIT)
async def get_roles_by_user_endpoint(
    request: Request, user_id: int, db: DbSession
) -> list[RolResponse]:
    """Active roles assigned to a user."""
    return await get_roles_by_user_id(db, user_id)


@rol_form_permission_router.post(
    "/assign",
    response_model=AssignResult,
    status_code=201,
    responses={**NOT_FOUND, **INVALID},
)
@limiter.limit(WRITE_LIMIT)
async def assign_permissions_endpoint(
    request: Request, body: RolFormPermissionAssign, db: DbSession
) -> AssignResult:
    """Grant (form, permission) pairs to a role; existing grants are skipped."""
    inserted = await assign_permissions(db, body)
    return AssignResult(
        success=True,
        message=f"{inserted} permission(s) assigned to rol {body.rol_id}",
        inserted=inserted,
    )


@rol_form_permission_router.get(
    "/rol/{rol_id}",
    response_model=list[FormPermissions],
    responses=INVALID,
)
@limiter.limit(API_LIMIT)
async def get_form_permissions_by_rol_endpoint(
    request: Request, rol_id: int, db: DbSession
) -> list[FormPermissions]:
    """Permission ids of a role grouped by form."""
    return await get_form_permissions_by_rol_id(db, rol_id)


@rol_form_permission_router.get(
    "/grouped/{user_id}",
    response_model=list[RolWithForms],
    responses=INVALID,
)
@limiter.limit(API_LIMIT)
async def get_permissions_grouped_endpoint(
    request: Request, user_id: int, db: DbSession
) -> list[RolWithForms]:
    """Permission names per form per role of a user."""
    return await get_permissions_grouped_by_user(db, user_id)


@rol_form_permission_router.get(
    "/menu/{user_id}",
    response_model=list[RolMenu],
    responses=INVALID,
)
@limiter.limit(API_LIMIT)
async def get_menu_endpoint(
    request: Request, user_id: int, db: DbSession
) -> list[RolMenu]:
    """Navigation menu of a user: forms per module per role."""
    return await get_menu(db, user_id)


@user_rol_router.post(
    "/assign",
    response_model=list[UserRolResponse],
    responses={**NOT_FOUND, **INVALID},
)
@limiter.limit(WRITE_LIMIT)
async def assign_roles_endpoint(
    request: Request, body: UserRolAssign, db: DbSession
) -> list[UserRolResponse]:
    """Replace every role of a user."""
    return await assign_roles(db, body)


@user_rol_router.get(
    "/user/{user_id}",
    response_model=list[UserRolResponse],
    responses=INVALID,
)
@limiter.limit(API_LIMIT)
async def get_user_roles_endpoint(
    request: Request, user_id: int, db: DbSession
) -> list[UserRolResponse]:
    """UserRol links of a user."""
    return await get_user_roles(db, user_id)


routers: list[APIRouter] = [
    person_router,
    user_router,
    rol_router,
    permission_router,
    form_router,
    module_router,
    form_module_router,
    rol_form_permission_router,
    user_rol_router,
]
