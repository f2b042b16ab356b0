"""
Mock place lookup.

Resolves place IDs from an in-memory table instead of calling Google.
"""
from typing import Dict, List, Optional

from core.application.dtos import PlaceDetails
from core.application.interfaces import IPlaceLookup
from core.domain.errors import PlaceNotFoundError


DEFAULT_PLACES = {
    "ChIJ-pickup": PlaceDetails(address="Av. Reforma 222, CDMX", latitude=19.4326, longitude=-99.1332),
    "ChIJ-dropoff": PlaceDetails(address="Av. Vallarta 1000, Guadalajara", latitude=20.6597, longitude=-103.3496),
    "ChIJ-depot": PlaceDetails(address="Blvd. Constitucion 500, Monterrey", latitude=25.6866, longitude=-100.3161),
}


class MockPlaceLookup(IPlaceLookup):
    """In-memory place lookup that records every place ID it is asked for."""

    def __init__(self, places: Optional[Dict[str, PlaceDetails]] = None):
        self.places = dict(DEFAULT_PLACES if places is None else places)
        self.requested: List[str] = []

    async def get_place_details(self, place_id: str) -> PlaceDetails:
        if not place_id:
            raise ValueError("place_id is required")
        self.requested.append(place_id)
        try:
            return self.places[place_id]
        except KeyError:
            raise PlaceNotFoundError(place_id) from None
