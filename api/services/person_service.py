"""Person and user services."""

from sqlalchemy.ext.asyncio import AsyncSession

from core.logger import get_logger
from repositories.person_repository import PersonRepository, UserRepository
from schemas import PersonCreate, PersonResponse, UserCreate, UserResponse
from services.base import EntityService
from services.exceptions import NotFoundError, ValidationError

logger = get_logger(__name__)

person_service = EntityService(
    entity_name="Person",
    repository_class=PersonRepository,
    response_schema=PersonResponse,
    create_schema=PersonCreate,
    required_fields=("first_name", "first_last_name"),
    patch_fields=(
        "first_name",
        "second_name",
        "first_last_name",
        "second_last_name",
        "phone_number",
        "number_identification",
    ),
    patch_skips_deleted=True,
)

user_service = EntityService(
    entity_name="User",
    repository_class=UserRepository,
    response_schema=UserResponse,
    create_schema=UserCreate,
    required_fields=("username", "email"),
    optional_reference_fields=("person_id",),
)


async def get_person_by_document(
    db: AsyncSession, number_identification: str
) -> PersonResponse:
    """Look up a person by identification number (soft-deleted rows excluded)."""
    if not number_identification or not number_identification.strip():
        raise ValidationError(
            "number_identification", "number_identification is required"
        )

    number = number_identification.strip()
    with person_service.guard("get_by_document"):
        person = await PersonRepository(db).get_by_document(number)
    if person is None:
        logger.info("person.document.not_found")
        raise NotFoundError("Person", number)
    return person_service.to_response(person)
