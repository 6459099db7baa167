"""Tests for person lookups and patches."""

import pytest
from sqlalchemy.ext.asyncio import AsyncSession

from schemas import PersonPatch
from services.exceptions import NotFoundError, ValidationError
from services.person_service import get_person_by_document, person_service
from tests.factories import PersonFactory, create_async

pytestmark = pytest.mark.integration


class TestGetPersonByDocument:
    async def test_strips_whitespace(self, db_session: AsyncSession):
        person = await create_async(
            PersonFactory, db_session, number_identification="8080"
        )

        result = await get_person_by_document(db_session, "  8080 ")

        assert result.id == person.id

    async def test_deactivated_person_not_found(self, db_session: AsyncSession):
        person = await create_async(
            PersonFactory, db_session, number_identification="9090"
        )
        await person_service.set_active(db_session, person.id, False)

        with pytest.raises(NotFoundError):
            await get_person_by_document(db_session, "9090")

    @pytest.mark.parametrize("document", ["", "   "])
    async def test_blank_document_rejected(self, db_session: AsyncSession, document):
        with pytest.raises(ValidationError):
            await get_person_by_document(db_session, document)


class TestPatchPerson:
    async def test_patch_updates_active_person(self, db_session: AsyncSession):
        person = await create_async(PersonFactory, db_session, first_name="Ana")

        result = await person_service.patch(
            db_session, PersonPatch(id=person.id, first_name="Lucia")
        )

        assert result.first_name == "Lucia"

    async def test_patch_deactivated_person_not_found(self, db_session: AsyncSession):
        person = await create_async(PersonFactory, db_session, first_name="Ana")
        await person_service.set_active(db_session, person.id, False)

        with pytest.raises(NotFoundError):
            await person_service.patch(
                db_session, PersonPatch(id=person.id, first_name="Lucia")
            )

        stored = await person_service.get_by_id(db_session, person.id)
        assert stored.first_name == "Ana"
