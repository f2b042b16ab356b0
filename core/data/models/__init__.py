"""Database models."""

from .base import Base
from .location_model import LocationModel
from .order_model import OrderModel
from .truck_model import TruckModel
from .user_model import UserModel

__all__ = ["Base", "LocationModel", "OrderModel", "TruckModel", "UserModel"]
