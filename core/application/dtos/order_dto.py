"""Application DTOs for Order operations."""

from typing import Optional

from pydantic import BaseModel, Field

from core.domain.enums import OrderStatus
from core.domain.queries import DEFAULT_LIMIT, DEFAULT_PAGE

from .common import EntityIdField, PartialUpdateRequest, RecordDTO
from .location_dto import LocationDTO
from .truck_dto import TruckDTO
from .user_dto import UserDTO

MAX_PAGE_SIZE = 100
# Keeps the row offset inside a signed 64-bit integer.
MAX_PAGE = 2**62 // MAX_PAGE_SIZE


class CreateOrderRequest(BaseModel):
    """Request DTO for creating an order."""

    user: EntityIdField = Field(..., description="User ID")
    truck: EntityIdField = Field(..., description="Truck ID")
    pickup: EntityIdField = Field(..., description="Pickup location ID")
    dropoff: EntityIdField = Field(..., description="Dropoff location ID")
    status: OrderStatus = Field(default=OrderStatus.CREATED, description="Order status")

    model_config = {"frozen": True}


class UpdateOrderRequest(PartialUpdateRequest):
    """Request DTO for updating an order. Omitted fields stay unchanged."""

    user: Optional[EntityIdField] = None
    truck: Optional[EntityIdField] = None
    pickup: Optional[EntityIdField] = None
    dropoff: Optional[EntityIdField] = None
    status: Optional[OrderStatus] = None


class ListOrdersQuery(BaseModel):
    """
    Listing parameters.

    Integral strings ("2") are coerced; anything else out of range is rejected.
    """

    status: Optional[OrderStatus] = None
    page: int = Field(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE)
    limit: int = Field(default=DEFAULT_LIMIT, ge=1, le=MAX_PAGE_SIZE)

    model_config = {"frozen": True}


class OrderDTO(RecordDTO):
    """Response DTO for a stored order (references as IDs)."""

    user: str
    truck: str
    pickup: str
    dropoff: str
    status: OrderStatus


class OrderViewDTO(RecordDTO):
    """Response DTO for a listed order with references expanded."""

    user: Optional[UserDTO] = None
    truck: Optional[TruckDTO] = None
    pickup: Optional[LocationDTO] = None
    dropoff: Optional[LocationDTO] = None
    status: OrderStatus
