"""
Google Places client.

Resolves a place ID to a formatted address and coordinates through the
Place Details endpoint.
"""
import asyncio
from typing import Any, Dict
import logging

import aiohttp

from core.application.dtos import PlaceDetails
from core.application.interfaces import IPlaceLookup
from core.domain.errors import PlaceLookupError, PlaceNotFoundError
from core.settings.modules import GooglePlacesSettings


logger = logging.getLogger(__name__)


class GooglePlacesClient(IPlaceLookup):
    """
    Google implementation of the place lookup.

    A fresh aiohttp session is opened per lookup.
    """

    def __init__(self, settings: GooglePlacesSettings):
        """
        Initialize Google Places client.

        Args:
            settings: API key, endpoint and timeout
        """
        self.settings = settings
        self.timeout = aiohttp.ClientTimeout(total=settings.timeout_seconds)

    async def get_place_details(self, place_id: str) -> PlaceDetails:
        if not place_id:
            raise ValueError("place_id is required")

        params = {
            "place_id": place_id,
            "fields": "formatted_address,geometry",
            "key": self.settings.api_key,
        }

        try:
            async with aiohttp.ClientSession(timeout=self.timeout) as session:
                async with session.get(self.settings.details_url, params=params) as response:
                    if response.status != 200:
                        error_text = await response.text()
                        logger.error(f"Google Places API error: {response.status} - {error_text}")
                        raise PlaceLookupError(
                            "Place lookup failed",
                            cause=f"Google Places API responded with {response.status}",
                        )
                    data = await response.json()
        except (aiohttp.ClientError, asyncio.TimeoutError) as e:
            logger.error(f"Google Places request failed: {e}", exc_info=True)
            raise PlaceLookupError("Place lookup failed", cause=str(e)) from e

        return self._parse(place_id, data)

    @staticmethod
    def _parse(place_id: str, data: Dict[str, Any]) -> PlaceDetails:
        result = data.get("result")
        if not result:
            logger.info(f"No place found for {place_id} (status: {data.get('status')})")
            raise PlaceNotFoundError(place_id)

        try:
            location = result["geometry"]["location"]
            return PlaceDetails(
                address=result["formatted_address"],
                latitude=location["lat"],
                longitude=location["lng"],
            )
        except (KeyError, TypeError) as e:
            raise PlaceLookupError("Place lookup failed", cause=f"Malformed place details: {e}") from e
