"""Shared DTO field types."""

from datetime import datetime
from typing import Annotated, Any, Dict

from pydantic import BaseModel, Field, StringConstraints, model_validator

from core.domain.value_objects import ENTITY_ID_PATTERN

# 24-char hex id, normalized to lowercase
EntityIdField = Annotated[
    str, StringConstraints(strip_whitespace=True, pattern=ENTITY_ID_PATTERN, to_lower=True)
]


class RecordDTO(BaseModel):
    """Response DTO base: id plus timestamps (camelCase on the wire)."""

    id: str = Field(..., description="Record ID")
    created_at: datetime = Field(..., serialization_alias="createdAt")
    updated_at: datetime = Field(..., serialization_alias="updatedAt")

    model_config = {"frozen": True, "from_attributes": True}


class PartialUpdateRequest(BaseModel):
    """Update DTO base: every field optional, at least one required."""

    model_config = {"frozen": True, "extra": "forbid"}

    @model_validator(mode="after")
    def _require_one_field(self):
        if not self.changes():
            raise ValueError("At least one field must be provided to update")
        return self

    def changes(self) -> Dict[str, Any]:
        """Fields actually sent by the caller."""
        return self.model_dump(exclude_unset=True, exclude_none=True)
