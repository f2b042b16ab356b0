"""Application service for Truck operations."""

from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import CreateTruckRequest, TruckDTO, UpdateTruckRequest
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import Truck, normalize_plates
from core.domain.errors import ConflictError, EntityNotFoundError, ReferenceNotFoundError
from core.domain.repositories import ExistenceLookup


logger = logging.getLogger(__name__)


class TruckApplicationService:
    """
    Application service for truck CRUD.

    Writes check plates uniqueness first, then that the owning user exists.
    Updates check that the truck exists before either.
    """

    def __init__(self, session_factory: async_sessionmaker, users: ExistenceLookup) -> None:
        """Initialize truck application service.

        Args:
            session_factory: SQLAlchemy async session factory
            users: Existence lookup for the owning user
        """
        self._session_factory = session_factory
        self._users = users

    async def create_truck(self, request: CreateTruckRequest) -> TruckDTO:
        """Create a new truck.

        Raises:
            ConflictError: If the plates are already registered
            ReferenceNotFoundError: If the owning user does not exist
        """
        plates = normalize_plates(request.plates)
        async with create_uow(self._session_factory) as uow:
            await self._ensure_plates_free(uow, plates)
            await self._ensure_owner_exists(request.user)

            truck = await uow.trucks.insert(
                Truck(user=request.user, year=request.year, color=request.color, plates=plates)
            )
            await uow.commit()

        logger.info(f"Registered truck {truck.id} ({truck.plates})")
        return TruckDTO.model_validate(truck)

    async def list_trucks(self, user: Optional[str] = None) -> List[TruckDTO]:
        filters = {"user": user} if user else {}
        async with create_uow(self._session_factory) as uow:
            trucks = await uow.trucks.find_all(**filters)
        return [TruckDTO.model_validate(truck) for truck in trucks]

    async def get_truck(self, truck_id: str) -> TruckDTO:
        async with create_uow(self._session_factory) as uow:
            truck = await uow.trucks.find_by_id(truck_id)
        if truck is None:
            raise EntityNotFoundError("Truck", truck_id)
        return TruckDTO.model_validate(truck)

    async def update_truck(self, truck_id: str, request: UpdateTruckRequest) -> TruckDTO:
        """Apply a partial update.

        Raises:
            EntityNotFoundError: If the truck does not exist
            ConflictError: If the new plates belong to another truck
            ReferenceNotFoundError: If a new owner is given and does not exist
        """
        changes = request.changes()
        for field in ("year", "color"):
            if field in changes:
                changes[field] = changes[field].strip()
        if "plates" in changes:
            changes["plates"] = normalize_plates(changes["plates"])

        async with create_uow(self._session_factory) as uow:
            if await uow.trucks.find_by_id(truck_id) is None:
                raise EntityNotFoundError("Truck", truck_id)
            if "plates" in changes:
                await self._ensure_plates_free(uow, changes["plates"], exclude_id=truck_id)
            if "user" in changes:
                await self._ensure_owner_exists(changes["user"])

            truck = await uow.trucks.update_by_id(truck_id, changes)
            if truck is None:
                raise EntityNotFoundError("Truck", truck_id)
            await uow.commit()

        return TruckDTO.model_validate(truck)

    async def delete_truck(self, truck_id: str) -> TruckDTO:
        async with create_uow(self._session_factory) as uow:
            truck = await uow.trucks.delete_by_id(truck_id)
            if truck is None:
                raise EntityNotFoundError("Truck", truck_id)
            await uow.commit()

        return TruckDTO.model_validate(truck)

    @staticmethod
    async def _ensure_plates_free(uow: UnitOfWork, plates: str, exclude_id: str = None) -> None:
        existing = await uow.trucks.find_one_by(plates=plates)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("Truck", "plates", plates)

    async def _ensure_owner_exists(self, user_id: str) -> None:
        if not await self._users.exists(user_id):
            raise ReferenceNotFoundError("user", self._users.kind, user_id)
