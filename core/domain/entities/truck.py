"""Truck entity."""
from dataclasses import dataclass
from datetime import datetime
from typing import Optional


def normalize_plates(plates: str) -> str:
    """Plates are stored trimmed and uppercase."""
    return plates.strip().upper()


@dataclass
class Truck:
    """Truck owned by a user."""
    user: str
    year: str
    color: str
    plates: str
    id: Optional[str] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    def __post_init__(self):
        self.year = self.year.strip()
        self.color = self.color.strip()
        self.plates = normalize_plates(self.plates)
