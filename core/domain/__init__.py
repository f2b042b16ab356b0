"""Domain layer - pure domain models and interfaces."""

from .entities import ExpandedOrder, Location, Order, Truck, User
from .enums import OrderStatus
from .errors import (
    AuthenticationError,
    ConflictError,
    DomainError,
    EntityNotFoundError,
    PlaceLookupError,
    PlaceNotFoundError,
    ReferenceNotFoundError,
    StoreUnavailableError,
)
from .repositories import EntityRepository, ExistenceLookup, OrderRepository

__all__ = [
    "AuthenticationError",
    "ConflictError",
    "DomainError",
    "EntityNotFoundError",
    "EntityRepository",
    "ExistenceLookup",
    "ExpandedOrder",
    "Location",
    "Order",
    "OrderRepository",
    "OrderStatus",
    "PlaceLookupError",
    "PlaceNotFoundError",
    "ReferenceNotFoundError",
    "StoreUnavailableError",
    "Truck",
    "User",
]
