"""Generic entity service: validation, mapping and error handling for CRUD.

Each entity gets one configured ``EntityService`` instance; entity-specific
operations live as module-level functions next to that instance.

Error handling:
- ``ValidationError`` is raised before any repository call.
- ``NotFoundError`` is raised after exactly one existence check.
- Any other exception is logged and wrapped in ``ExternalServiceError``.
  Domain errors pass through ``guard`` untouched.
"""

import re
from collections.abc import Iterator
from contextlib import contextmanager
from typing import Any

from pydantic import BaseModel
from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from models import utcnow
from repositories.base import BaseRepository
from services.exceptions import (
    DomainError,
    ExternalServiceError,
    NotFoundError,
    ValidationError,
)

logger = get_logger(__name__)

DATABASE_SUBSYSTEM = "database"


def _snake(name: str) -> str:
    return re.sub(r"(?<!^)(?=[A-Z])", "_", name).lower()


def is_blank(value: Any) -> bool:
    """True for None and for strings that are empty after stripping."""
    if value is None:
        return True
    return isinstance(value, str) and not value.strip()


def require_positive_id(value: int | None, field: str = "id", entity: str = "") -> int:
    if value is None or value <= 0:
        label = f"{entity} {field}".strip()
        raise ValidationError(field, f"{label} must be greater than zero")
    return value


class EntityService[ModelT, ResponseT: BaseModel]:
    """CRUD service for one entity.

    Args:
        entity_name: Name used in error messages and log events.
        repository_class: ``BaseRepository`` subclass for the entity.
        response_schema: Pydantic schema built from the ORM row.
        create_schema: Writable fields; its field names drive the mapping.
        required_fields: Text fields that must be non-blank.
        reference_fields: Foreign keys that must be > 0.
        optional_reference_fields: Foreign keys that must be > 0 when given.
        patch_fields: Fields a PATCH may change. Empty disables PATCH.
        append_only: Rows can only be listed, read and created.
        patch_skips_deleted: PATCH treats soft-deleted rows as missing.
    """

    def __init__(
        self,
        *,
        entity_name: str,
        repository_class: type[BaseRepository],
        response_schema: type[ResponseT],
        create_schema: type[BaseModel],
        required_fields: tuple[str, ...] = (),
        reference_fields: tuple[str, ...] = (),
        optional_reference_fields: tuple[str, ...] = (),
        patch_fields: tuple[str, ...] = (),
        append_only: bool = False,
        patch_skips_deleted: bool = False,
    ):
        self.entity_name = entity_name
        self.repository_class = repository_class
        self.response_schema = response_schema
        self.create_schema = create_schema
        self.fields: tuple[str, ...] = tuple(create_schema.model_fields)
        self.required_fields = required_fields
        self.reference_fields = reference_fields
        self.optional_reference_fields = optional_reference_fields
        self.patch_fields = patch_fields
        self.append_only = append_only
        self.patch_skips_deleted = patch_skips_deleted
        self.log_name = _snake(entity_name)

    @property
    def model(self) -> type[ModelT]:
        return self.repository_class.model

    @property
    def has_active_flag(self) -> bool:
        return hasattr(self.model, "active")

    @property
    def supports_patch(self) -> bool:
        return bool(self.patch_fields)

    def repository(self, db: AsyncSession) -> BaseRepository:
        return self.repository_class(db)

    @contextmanager
    def guard(self, operation: str, entity_id: int | None = None) -> Iterator[None]:
        try:
            yield
        except DomainError:
            raise
        except Exception as e:
            logger.exception(
                f"{self.log_name}.{operation}.failed",
                entity=self.entity_name,
                entity_id=entity_id,
            )
            suffix = f" with id {entity_id}" if entity_id is not None else ""
            raise ExternalServiceError(
                DATABASE_SUBSYSTEM,
                f"Failed to {operation} {self.entity_name}{suffix}",
                e,
            ) from e

    # --- Validation -------------------------------------------------------

    def validate(self, data: BaseModel | None) -> BaseModel:
        """Check required text and reference fields of a create/update body."""
        if data is None:
            raise ValidationError("body", f"{self.entity_name} data is required")

        for field in self.required_fields:
            if is_blank(getattr(data, field, None)):
                raise ValidationError(field, f"{field} is required")

        for field in self.reference_fields:
            require_positive_id(getattr(data, field, None), field, self.entity_name)

        for field in self.optional_reference_fields:
            value = getattr(data, field, None)
            if value is not None:
                require_positive_id(value, field, self.entity_name)

        return data

    def _reject_if_append_only(self, operation: str) -> None:
        if self.append_only:
            raise ValidationError(
                "id", f"{self.entity_name} is append-only and cannot be {operation}"
            )

    def _require_active_flag(self) -> None:
        if not self.has_active_flag:
            raise ValidationError(
                "active", f"{self.entity_name} does not support activation"
            )

    # --- Mapping ----------------------------------------------------------

    def to_entity(self, data: BaseModel) -> ModelT:
        """Build an ORM instance from a create or update body."""
        values = {field: getattr(data, field) for field in self.fields}
        entity_id = getattr(data, "id", None)
        if entity_id is not None:
            values["id"] = entity_id
        if self.has_active_flag:
            values["active"] = True
        return self.model(**values)

    def to_response(self, entity: ModelT) -> ResponseT:
        return self.response_schema.model_validate(entity)

    # --- Operations -------------------------------------------------------

    async def get_all(
        self, db: AsyncSession, *, include_inactive: bool = False
    ) -> list[ResponseT]:
        with self.guard("list"):
            entities = await self.repository(db).get_all(
                active_only=not include_inactive
            )
        return [self.to_response(entity) for entity in entities]

    async def _get_existing(self, db: AsyncSession, entity_id: int) -> ModelT:
        repository = self.repository(db)
        with self.guard("get", entity_id):
            entity = await repository.get_by_id(entity_id)
        if entity is None:
            logger.info(f"{self.log_name}.not_found", entity_id=entity_id)
            raise NotFoundError(self.entity_name, entity_id)
        return entity

    async def get_by_id(self, db: AsyncSession, entity_id: int) -> ResponseT:
        require_positive_id(entity_id, "id", self.entity_name)
        entity = await self._get_existing(db, entity_id)
        return self.to_response(entity)

    async def create(self, db: AsyncSession, data: BaseModel | None) -> ResponseT:
        self.validate(data)
        entity = self.to_entity(data)
        if hasattr(entity, "id"):
            entity.id = None
        if hasattr(self.model, "create_date"):
            entity.create_date = utcnow()

        with self.guard("create"):
            created = await self.repository(db).create(entity)

        logger.info(f"{self.log_name}.created", entity_id=created.id)
        return self.to_response(created)

    async def update(self, db: AsyncSession, data: BaseModel | None) -> ResponseT:
        """Replace every writable field of an existing row."""
        self._reject_if_append_only("updated")
        self.validate(data)
        entity_id = require_positive_id(
            getattr(data, "id", None), "id", self.entity_name
        )

        entity = await self._get_existing(db, entity_id)
        values: dict[str, Any] = {field: getattr(data, field) for field in self.fields}
        if hasattr(self.model, "update_date"):
            values["update_date"] = utcnow()

        with self.guard("update", entity_id):
            updated = await self.repository(db).update(entity, values)

        logger.info(f"{self.log_name}.updated", entity_id=entity_id)
        return self.to_response(updated)

    async def patch(self, db: AsyncSession, data: BaseModel | None) -> ResponseT:
        """Apply only the provided (non-null, non-blank) patchable fields."""
        self._reject_if_append_only("updated")
        if not self.supports_patch:
            raise ValidationError("body", f"{self.entity_name} does not support patch")
        if data is None:
            raise ValidationError("body", f"{self.entity_name} data is required")
        entity_id = require_positive_id(
            getattr(data, "id", None), "id", self.entity_name
        )

        values: dict[str, Any] = {}
        for field in self.patch_fields:
            value = getattr(data, field, None)
            if is_blank(value):
                continue
            if field in (*self.reference_fields, *self.optional_reference_fields):
                require_positive_id(value, field, self.entity_name)
            values[field] = value

        if not values:
            raise ValidationError(
                "body", f"At least one field of {self.entity_name} must be provided"
            )

        entity = await self._get_existing(db, entity_id)
        if self.patch_skips_deleted and entity.delete_date is not None:
            logger.info(f"{self.log_name}.not_found", entity_id=entity_id)
            raise NotFoundError(self.entity_name, entity_id)
        if hasattr(self.model, "update_date"):
            values["update_date"] = utcnow()

        with self.guard("patch", entity_id):
            updated = await self.repository(db).update(entity, values)

        logger.info(
            f"{self.log_name}.patched",
            entity_id=entity_id,
            fields=sorted(k for k in values if k != "update_date"),
        )
        return self.to_response(updated)

    async def delete(self, db: AsyncSession, entity_id: int) -> None:
        """Hard delete. Use ``set_active(..., False)`` to soft delete."""
        self._reject_if_append_only("deleted")
        require_positive_id(entity_id, "id", self.entity_name)
        entity = await self._get_existing(db, entity_id)

        with self.guard("delete", entity_id):
            await self.repository(db).delete(entity)

        logger.info(f"{self.log_name}.deleted", entity_id=entity_id)

    async def set_active(
        self, db: AsyncSession, entity_id: int, active: bool
    ) -> ResponseT:
        """Toggle the active flag; deactivation stamps ``delete_date``."""
        self._reject_if_append_only("deactivated")
        self._require_active_flag()
        require_positive_id(entity_id, "id", self.entity_name)
        entity = await self._get_existing(db, entity_id)

        extra = {"delete_date": None if active else utcnow()}
        with self.guard("set_active", entity_id):
            updated = await self.repository(db).set_active(entity, active, extra=extra)

        logger.info(
            f"{self.log_name}.active_changed", entity_id=entity_id, active=active
        )
        return self.to_response(updated)
