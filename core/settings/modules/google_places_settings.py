from __future__ import annotations

from pydantic import Field

from core.settings.base_settings import TrucklineBaseSettings


class GooglePlacesSettings(TrucklineBaseSettings):
    """
    Google Places API settings.
    Loaded from .env file with exact variable name matching.
    """

    api_key: str = Field("", alias="GOOGLE_API_KEY")
    details_url: str = Field(
        "https://maps.googleapis.com/maps/api/place/details/json",
        alias="GOOGLE_PLACES_URL",
    )
    timeout_seconds: float = Field(10.0, alias="GOOGLE_PLACES_TIMEOUT")
