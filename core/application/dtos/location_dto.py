"""Application DTOs for Location operations."""

from pydantic import BaseModel, Field

from .common import RecordDTO


class LocationRequest(BaseModel):
    """Request DTO for creating or updating a location by place ID."""

    place_id: str = Field(..., min_length=1, description="Google place ID")

    model_config = {"frozen": True, "str_strip_whitespace": True}


class PlaceDetails(BaseModel):
    """Address and coordinates resolved for a place ID."""

    address: str
    latitude: float
    longitude: float

    model_config = {"frozen": True}


class LocationDTO(RecordDTO):
    """Response DTO for locations."""

    address: str
    place_id: str
    latitude: float
    longitude: float
