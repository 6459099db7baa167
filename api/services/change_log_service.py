"""Change log service (append-only audit records)."""

from repositories.change_log_repository import ChangeLogRepository
from schemas import ChangeLogCreate, ChangeLogResponse
from services.base import EntityService

change_log_service = EntityService(
    entity_name="ChangeLog",
    repository_class=ChangeLogRepository,
    response_schema=ChangeLogResponse,
    create_schema=ChangeLogCreate,
    required_fields=("entity_name",),
    optional_reference_fields=("entity_id",),
    append_only=True,
)
