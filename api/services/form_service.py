"""Form, module and form-module services."""

from repositories.form_repository import (
    FormModuleRepository,
    FormRepository,
    ModuleRepository,
)
from schemas import (
    FormCreate,
    FormModuleCreate,
    FormModuleResponse,
    FormResponse,
    ModuleCreate,
    ModuleResponse,
)
from services.base import EntityService

form_service = EntityService(
    entity_name="Form",
    repository_class=FormRepository,
    response_schema=FormResponse,
    create_schema=FormCreate,
    required_fields=("name",),
    patch_fields=("name", "description", "path"),
)

module_service = EntityService(
    entity_name="Module",
    repository_class=ModuleRepository,
    response_schema=ModuleResponse,
    create_schema=ModuleCreate,
    required_fields=("name",),
    patch_fields=("name", "description"),
)

form_module_service = EntityService(
    entity_name="FormModule",
    repository_class=FormModuleRepository,
    response_schema=FormModuleResponse,
    create_schema=FormModuleCreate,
    reference_fields=("form_id", "module_id"),
)
