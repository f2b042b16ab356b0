"""Application service for Location operations."""

from typing import List
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import LocationDTO, LocationRequest
from core.application.interfaces import IPlaceLookup
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import Location
from core.domain.errors import ConflictError, EntityNotFoundError


logger = logging.getLogger(__name__)


class LocationApplicationService:
    """
    Application service for location CRUD.

    Callers only send a place ID; address and coordinates are resolved
    through the place lookup.
    """

    def __init__(self, session_factory: async_sessionmaker, place_lookup: IPlaceLookup) -> None:
        """Initialize location application service.

        Args:
            session_factory: SQLAlchemy async session factory
            place_lookup: Place ID resolver
        """
        self._session_factory = session_factory
        self._places = place_lookup

    async def create_location(self, request: LocationRequest) -> LocationDTO:
        """Create a location from a place ID.

        Raises:
            ConflictError: If a location with this place ID exists
            PlaceNotFoundError: If the place ID resolves to nothing
        """
        async with create_uow(self._session_factory) as uow:
            await self._ensure_place_free(uow, request.place_id)

            details = await self._places.get_place_details(request.place_id)
            location = await uow.locations.insert(
                Location(
                    address=details.address,
                    place_id=request.place_id,
                    latitude=details.latitude,
                    longitude=details.longitude,
                )
            )
            await uow.commit()

        logger.info(f"Registered location {location.id} ({location.place_id})")
        return LocationDTO.model_validate(location)

    async def list_locations(self) -> List[LocationDTO]:
        async with create_uow(self._session_factory) as uow:
            locations = await uow.locations.find_all()
        return [LocationDTO.model_validate(location) for location in locations]

    async def get_location(self, location_id: str) -> LocationDTO:
        async with create_uow(self._session_factory) as uow:
            location = await uow.locations.find_by_id(location_id)
        if location is None:
            raise EntityNotFoundError("Location", location_id)
        return LocationDTO.model_validate(location)

    async def update_location(self, location_id: str, request: LocationRequest) -> LocationDTO:
        """Point a location at another place ID and re-resolve it.

        Raises:
            EntityNotFoundError: If the location does not exist
            ConflictError: If another location already has the place ID
            PlaceNotFoundError: If the place ID resolves to nothing
        """
        async with create_uow(self._session_factory) as uow:
            if await uow.locations.find_by_id(location_id) is None:
                raise EntityNotFoundError("Location", location_id)
            await self._ensure_place_free(uow, request.place_id, exclude_id=location_id)

            details = await self._places.get_place_details(request.place_id)
            location = await uow.locations.update_by_id(
                location_id,
                {
                    "place_id": request.place_id,
                    "address": details.address,
                    "latitude": details.latitude,
                    "longitude": details.longitude,
                },
            )
            await uow.commit()

        return LocationDTO.model_validate(location)

    async def delete_location(self, location_id: str) -> LocationDTO:
        async with create_uow(self._session_factory) as uow:
            location = await uow.locations.delete_by_id(location_id)
            if location is None:
                raise EntityNotFoundError("Location", location_id)
            await uow.commit()

        return LocationDTO.model_validate(location)

    @staticmethod
    async def _ensure_place_free(uow: UnitOfWork, place_id: str, exclude_id: str = None) -> None:
        existing = await uow.locations.find_one_by(place_id=place_id)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Location", "place_id", place_id)
