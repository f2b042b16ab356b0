"""Application DTOs for Truck operations."""

from typing import Optional

from pydantic import BaseModel, Field

from .common import EntityIdField, PartialUpdateRequest, RecordDTO

PLATES_PATTERN = r"^[A-Za-z0-9]+$"


class CreateTruckRequest(BaseModel):
    """Request DTO for creating a truck."""

    user: EntityIdField = Field(..., description="Owner user ID")
    year: str = Field(..., min_length=1, description="Model year")
    color: str = Field(..., min_length=1, description="Color")
    plates: str = Field(..., min_length=6, max_length=10, pattern=PLATES_PATTERN)

    model_config = {"frozen": True}


class UpdateTruckRequest(PartialUpdateRequest):
    """Request DTO for updating a truck."""

    user: Optional[EntityIdField] = None
    year: Optional[str] = Field(None, min_length=1)
    color: Optional[str] = Field(None, min_length=1)
    plates: Optional[str] = Field(None, min_length=6, max_length=10, pattern=PLATES_PATTERN)


class TruckDTO(RecordDTO):
    """Response DTO for trucks."""

    user: str
    year: str
    color: str
    plates: str
