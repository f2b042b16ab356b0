"""SQLAlchemy repositories."""

from .base_repository_impl import SqlAlchemyExistenceLookup, SqlAlchemyRepository
from .entity_repositories_impl import (
    SqlAlchemyLocationRepository,
    SqlAlchemyTruckRepository,
    SqlAlchemyUserRepository,
)
from .order_repository_impl import SqlAlchemyOrderRepository

__all__ = [
    "SqlAlchemyExistenceLookup",
    "SqlAlchemyLocationRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyRepository",
    "SqlAlchemyTruckRepository",
    "SqlAlchemyUserRepository",
]
