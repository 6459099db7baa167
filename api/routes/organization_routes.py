"""Regional, center, sede and user-sede endpoints."""

from fastapi import APIRouter

from routes.crud import build_crud_router
from schemas import (
    CenterPatch,
    CenterUpdate,
    RegionalPatch,
    RegionalUpdate,
    SedePatch,
    SedeUpdate,
    UserSedeUpdate,
)
from services.organization_service import (
    center_service,
    regional_service,
    sede_service,
    user_sede_service,
)

routers: list[APIRouter] = [
    build_crud_router(
        regional_service,
        path="Regional",
        update_schema=RegionalUpdate,
        patch_schema=RegionalPatch,
    ),
    build_crud_router(
        center_service,
        path="Center",
        update_schema=CenterUpdate,
        patch_schema=CenterPatch,
    ),
    build_crud_router(
        sede_service,
        path="Sede",
        update_schema=SedeUpdate,
        patch_schema=SedePatch,
    ),
    build_crud_router(user_sede_service, path="UserSede", update_schema=UserSedeUpdate),
]
