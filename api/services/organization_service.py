"""Regional, center, sede and user-sede services."""

from repositories.organization_repository import (
    CenterRepository,
    RegionalRepository,
    SedeRepository,
    UserSedeRepository,
)
from schemas import (
    CenterCreate,
    CenterResponse,
    RegionalCreate,
    RegionalResponse,
    SedeCreate,
    SedeResponse,
    UserSedeCreate,
    UserSedeResponse,
)
from services.base import EntityService

regional_service = EntityService(
    entity_name="Regional",
    repository_class=RegionalRepository,
    response_schema=RegionalResponse,
    create_schema=RegionalCreate,
    required_fields=("name",),
    patch_fields=("name", "code_regional", "description", "address"),
)

center_service = EntityService(
    entity_name="Center",
    repository_class=CenterRepository,
    response_schema=CenterResponse,
    create_schema=CenterCreate,
    required_fields=("name",),
    optional_reference_fields=("regional_id",),
    patch_fields=("name", "address"),
)

sede_service = EntityService(
    entity_name="Sede",
    repository_class=SedeRepository,
    response_schema=SedeResponse,
    create_schema=SedeCreate,
    required_fields=("name",),
    optional_reference_fields=("center_id",),
    patch_fields=("name", "address"),
)

user_sede_service = EntityService(
    entity_name="UserSede",
    repository_class=UserSedeRepository,
    response_schema=UserSedeResponse,
    create_schema=UserSedeCreate,
    reference_fields=("user_id", "sede_id"),
)
