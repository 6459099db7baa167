"""Regional, center, sede and user-sede repositories."""

from models import Center, Regional, Sede, UserSede
from repositories.base import BaseRepository


class RegionalRepository(BaseRepository[Regional]):
    model = Regional


class CenterRepository(BaseRepository[Center]):
    model = Center


class SedeRepository(BaseRepository[Sede]):
    model = Sede


class UserSedeRepository(BaseRepository[UserSede]):
    model = UserSede
