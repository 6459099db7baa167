"""Person and user repositories."""

from sqlalchemy import select

from models import Person, User
from repositories.base import BaseRepository
from repositories.utils import log_query


class PersonRepository(BaseRepository[Person]):
    model = Person

    @log_query("Person.get_by_document")
    async def get_by_document(self, number_identification: str) -> Person | None:
        """Find a person by identification number, ignoring soft-deleted rows."""
        result = await self.db.execute(
            select(Person)
            .where(
                Person.number_identification == number_identification,
                Person.delete_date.is_(None),
            )
            .order_by(Person.id)
            .limit(1)
        )
        return result.scalar_one_or_none()


class UserRepository(BaseRepository[User]):
    model = User

    @log_query("User.get_by_username")
    async def get_by_username(self, username: str) -> User | None:
        result = await self.db.execute(select(User).where(User.username == username))
        return result.scalar_one_or_none()
