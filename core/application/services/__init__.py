"""Application services."""
from .auth_service import AuthApplicationService
from .location_service import LocationApplicationService
from .order_service import OrderApplicationService
from .truck_service import TruckApplicationService
from .user_service import UserApplicationService

__all__ = [
    "AuthApplicationService",
    "LocationApplicationService",
    "OrderApplicationService",
    "TruckApplicationService",
    "UserApplicationService",
]
