"""Application layer - services, pipelines, validators, interfaces, and DTOs."""

from .dtos import (
    CreateOrderRequest,
    ListOrdersQuery,
    OrderDTO,
    OrderViewDTO,
    UpdateOrderRequest,
)
from .interfaces import IPasswordHasher, IPlaceLookup, ITokenService
from .pipelines import OrderReadPipeline
from .services import (
    AuthApplicationService,
    LocationApplicationService,
    OrderApplicationService,
    TruckApplicationService,
    UserApplicationService,
)
from .validators import RelationValidator

__all__ = [
    # DTOs
    "CreateOrderRequest",
    "ListOrdersQuery",
    "OrderDTO",
    "OrderViewDTO",
    "UpdateOrderRequest",
    # Services
    "AuthApplicationService",
    "LocationApplicationService",
    "OrderApplicationService",
    "TruckApplicationService",
    "UserApplicationService",
    # Read side
    "OrderReadPipeline",
    "RelationValidator",
    # Interfaces
    "IPasswordHasher",
    "IPlaceLookup",
    "ITokenService",
]
