"""SQLAlchemy repositories for users, trucks and locations."""

from ..mappers import LocationMapper, TruckMapper, UserMapper
from .base_repository_impl import SqlAlchemyRepository


class SqlAlchemyUserRepository(SqlAlchemyRepository):
    mapper = UserMapper
    kind = "User"


class SqlAlchemyTruckRepository(SqlAlchemyRepository):
    mapper = TruckMapper
    kind = "Truck"


class SqlAlchemyLocationRepository(SqlAlchemyRepository):
    mapper = LocationMapper
    kind = "Location"
