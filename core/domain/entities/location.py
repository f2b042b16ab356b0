"""Location entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


@dataclass
class Location:
    """
    A place resolved from the place lookup service.
    
    Address and coordinates come from the lookup, never from the caller.
    """
    address: str
    place_id: str
    latitude: float
    longitude: float
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None
