"""Data layer - infrastructure persistence and mapping."""

from .mappers import LocationMapper, OrderMapper, TruckMapper, UserMapper
from .models import Base, LocationModel, OrderModel, TruckModel, UserModel
from .repositories import (
    SqlAlchemyExistenceLookup,
    SqlAlchemyLocationRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyTruckRepository,
    SqlAlchemyUserRepository,
)
from .uow import UnitOfWork, create_uow

__all__ = [
    "Base",
    "create_uow",
    "LocationMapper",
    "LocationModel",
    "OrderMapper",
    "OrderModel",
    "SqlAlchemyExistenceLookup",
    "SqlAlchemyLocationRepository",
    "SqlAlchemyOrderRepository",
    "SqlAlchemyTruckRepository",
    "SqlAlchemyUserRepository",
    "TruckMapper",
    "TruckModel",
    "UnitOfWork",
    "UserMapper",
    "UserModel",
]
