"""
Order aggregate.

CRITICAL: This file must contain ZERO imports from:
- sqlalchemy
- pydantic
- fastapi
"""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional

from ..enums import OrderStatus
from .location import Location
from .truck import Truck
from .user import User


@dataclass
class Order:
    """
    Transport order.
    
    Holds references (ids) to its user, truck and the pickup/dropoff
    locations. Nothing referenced is embedded in storage.
    """
    user: str
    truck: str
    pickup: str
    dropoff: str
    status: OrderStatus = OrderStatus.CREATED
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.status = OrderStatus(self.status)


@dataclass
class ExpandedOrder:
    """
    Read-side view of an order with every reference replaced by its record.
    
    A reference that no longer resolves is left as None.
    """
    order: Order
    user: Optional[User] = None
    truck: Optional[Truck] = None
    pickup: Optional[Location] = None
    dropoff: Optional[Location] = None
