"""Domain entities."""

from .location import Location
from .order import ExpandedOrder, Order
from .truck import Truck, normalize_plates
from .user import User

__all__ = [
    "ExpandedOrder",
    "Location",
    "Order",
    "Truck",
    "User",
    "normalize_plates",
]
