"""Application DTOs."""

from .auth_dto import LoginRequest, TokenResponse
from .location_dto import LocationDTO, LocationRequest, PlaceDetails
from .order_dto import (
    CreateOrderRequest,
    ListOrdersQuery,
    OrderDTO,
    OrderViewDTO,
    UpdateOrderRequest,
)
from .truck_dto import CreateTruckRequest, TruckDTO, UpdateTruckRequest
from .user_dto import CreateUserRequest, UpdateUserRequest, UserDTO

__all__ = [
    "CreateOrderRequest",
    "CreateTruckRequest",
    "CreateUserRequest",
    "ListOrdersQuery",
    "LocationDTO",
    "LocationRequest",
    "LoginRequest",
    "OrderDTO",
    "OrderViewDTO",
    "PlaceDetails",
    "TokenResponse",
    "TruckDTO",
    "UpdateOrderRequest",
    "UpdateTruckRequest",
    "UpdateUserRequest",
    "UserDTO",
]
