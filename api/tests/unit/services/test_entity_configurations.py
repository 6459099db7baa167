"""Checks that run against every configured entity service.

Each service is wired from a model, a set of schemas and a few field lists;
these tests catch a field list that drifts from its schemas, and confirm the
shared guards (id, required text, references) hold for every entity.
"""

from typing import Any, get_args
from unittest.mock import AsyncMock, MagicMock, patch

import pytest
from pydantic import BaseModel

import schemas
from services import (
    change_log_service,
    form_service,
    organization_service,
    permission_service,
    person_service,
    rol_service,
    training_service,
)
from services.base import EntityService
from services.exceptions import ValidationError

pytestmark = pytest.mark.unit

SERVICES: list[EntityService] = [
    person_service.person_service,
    person_service.user_service,
    rol_service.rol_service,
    rol_service.user_rol_service,
    permission_service.permission_service,
    permission_service.rol_form_permission_service,
    form_service.form_service,
    form_service.module_service,
    form_service.form_module_service,
    organization_service.regional_service,
    organization_service.center_service,
    organization_service.sede_service,
    organization_service.user_sede_service,
    training_service.program_service,
    training_service.process_service,
    training_service.concept_service,
    training_service.enterprise_service,
    training_service.verification_service,
    training_service.type_modality_service,
    training_service.registery_sofia_service,
    training_service.state_service,
    training_service.aprendiz_service,
    training_service.aprendiz_program_service,
    training_service.instructor_service,
    training_service.instructor_program_service,
    training_service.aprendiz_process_instructor_service,
    change_log_service.change_log_service,
]

REQUIRED_FIELD_CASES = [
    (service, field) for service in SERVICES for field in service.required_fields
]
REFERENCE_FIELD_CASES = [
    (service, field)
    for service in SERVICES
    for field in (*service.reference_fields, *service.optional_reference_fields)
]


def _name(value: Any) -> str:
    if isinstance(value, EntityService):
        return value.entity_name
    return str(value)


def _field_types(schema: type[BaseModel], field: str) -> tuple[type, ...]:
    annotation = schema.model_fields[field].annotation
    return get_args(annotation) or (annotation,)


def _is_optional(schema: type[BaseModel], field: str) -> bool:
    return type(None) in _field_types(schema, field)


def _update_schema(service: EntityService) -> type[BaseModel]:
    return getattr(schemas, f"{service.entity_name}Update", service.create_schema)


def _patch_schema(service: EntityService) -> type[BaseModel] | None:
    return getattr(schemas, f"{service.entity_name}Patch", None)


def _sample(service: EntityService, schema: type[BaseModel], **overrides) -> BaseModel:
    """Build a valid body, filling every field with a type-appropriate value."""
    values: dict[str, Any] = {}
    for index, field in enumerate(schema.model_fields, start=1):
        if int in _field_types(schema, field):
            values[field] = index
        else:
            values[field] = f"{service.log_name}-{field}"
    values.update(overrides)
    return schema(**values)


def _with_id(entity):
    entity.id = 100
    return entity


@pytest.fixture
def db() -> MagicMock:
    return MagicMock()


@pytest.fixture
def repo() -> AsyncMock:
    return AsyncMock()


def test_every_entity_is_covered():
    assert len(SERVICES) == 27
    assert len({service.entity_name for service in SERVICES}) == 27


@pytest.mark.parametrize("service", SERVICES, ids=_name)
class TestSchemaAlignment:
    def test_create_fields_are_model_columns(self, service):
        for field in service.fields:
            assert hasattr(service.model, field), field

    def test_update_adds_only_the_id(self, service):
        update = _update_schema(service)
        if update is service.create_schema:
            assert service.append_only
            return

        assert set(update.model_fields) == {"id", *service.fields}

    def test_response_exposes_every_create_field(self, service):
        assert {"id", *service.fields} <= set(service.response_schema.model_fields)

    def test_required_text_fields_match_schema(self, service):
        required_text = {
            field
            for field in service.fields
            if str in _field_types(service.create_schema, field)
            and not _is_optional(service.create_schema, field)
        }

        assert set(service.required_fields) == required_text

    def test_reference_fields_match_schema(self, service):
        schema = service.create_schema
        ints = [f for f in service.fields if int in _field_types(schema, f)]

        assert set(service.reference_fields) == {
            f for f in ints if not _is_optional(schema, f)
        }
        assert set(service.optional_reference_fields) == {
            f for f in ints if _is_optional(schema, f)
        }

    def test_patch_schema_matches_patch_fields(self, service):
        patch_schema = _patch_schema(service)
        if not service.supports_patch:
            assert patch_schema is None
            return

        assert patch_schema is not None
        assert set(patch_schema.model_fields) == {"id", *service.patch_fields}
        assert set(service.patch_fields) <= set(service.fields)

    def test_active_flag_matches_response(self, service):
        assert service.has_active_flag == (
            "active" in service.response_schema.model_fields
        )


@pytest.mark.parametrize("service", SERVICES, ids=_name)
class TestSharedGuards:
    async def test_get_by_id_rejects_zero(self, db, repo, service):
        with patch.object(service, "repository", return_value=repo):
            with pytest.raises(ValidationError) as exc_info:
                await service.get_by_id(db, 0)

        assert exc_info.value.field == "id"
        repo.get_by_id.assert_not_called()

    async def test_create_accepts_sample_body(self, db, repo, service):
        repo.create.side_effect = _with_id
        data = _sample(service, service.create_schema)

        with patch.object(service, "repository", return_value=repo):
            result = await service.create(db, data)

        assert result.model_dump(include=set(service.fields)) == data.model_dump()
        repo.create.assert_awaited_once()

    def test_to_entity_round_trip(self, service):
        data = _sample(service, _update_schema(service))

        entity = service.to_entity(data)
        if entity.id is None:
            entity.id = 1
        response = service.to_response(entity)

        dumped = response.model_dump(include=set(type(data).model_fields))
        assert dumped == data.model_dump()
        if service.has_active_flag:
            assert response.active is True


@pytest.mark.parametrize(("service", "field"), REQUIRED_FIELD_CASES, ids=_name)
@pytest.mark.parametrize("blank", ["", "   "])
async def test_create_rejects_blank_required_field(db, repo, service, field, blank):
    data = _sample(service, service.create_schema, **{field: blank})

    with patch.object(service, "repository", return_value=repo):
        with pytest.raises(ValidationError) as exc_info:
            await service.create(db, data)

    assert exc_info.value.field == field
    repo.create.assert_not_called()


@pytest.mark.parametrize(("service", "field"), REFERENCE_FIELD_CASES, ids=_name)
async def test_create_rejects_zero_reference(db, repo, service, field):
    data = _sample(service, service.create_schema, **{field: 0})

    with patch.object(service, "repository", return_value=repo):
        with pytest.raises(ValidationError) as exc_info:
            await service.create(db, data)

    assert exc_info.value.field == field
    repo.create.assert_not_called()


@pytest.mark.parametrize(
    ("service", "field"),
    [case for case in REFERENCE_FIELD_CASES if not case[0].append_only],
    ids=_name,
)
async def test_update_rejects_zero_reference(db, repo, service, field):
    data = _sample(service, _update_schema(service), id=1, **{field: 0})

    with patch.object(service, "repository", return_value=repo):
        with pytest.raises(ValidationError) as exc_info:
            await service.update(db, data)

    assert exc_info.value.field == field
    repo.get_by_id.assert_not_called()
    repo.update.assert_not_called()
