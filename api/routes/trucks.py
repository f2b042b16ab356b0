"""
Truck management endpoints.

Provides CRUD operations for trucks.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_truck_service
from api.routes.params import EntityIdPath
from core.application.dtos import CreateTruckRequest, TruckDTO, UpdateTruckRequest
from core.application.services import TruckApplicationService
from core.domain.value_objects import ENTITY_ID_PATTERN


router = APIRouter()


@router.get("", response_model=List[TruckDTO], summary="List trucks")
async def list_trucks(
    user: Optional[str] = Query(default=None, pattern=ENTITY_ID_PATTERN, description="Owner user ID"),
    service: TruckApplicationService = Depends(get_truck_service),
):
    """
    List trucks, newest first.

    **Query Parameters:**
    - `user`: Only trucks owned by this user
    """
    return await service.list_trucks(user.lower() if user else None)


@router.post(
    "",
    response_model=TruckDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a truck",
)
async def create_truck(
    request: CreateTruckRequest,
    service: TruckApplicationService = Depends(get_truck_service),
):
    return await service.create_truck(request)


@router.get("/{truck_id}", response_model=TruckDTO, summary="Get truck by ID")
async def get_truck(
    truck_id: EntityIdPath,
    service: TruckApplicationService = Depends(get_truck_service),
):
    return await service.get_truck(truck_id.lower())


@router.put("/{truck_id}", response_model=TruckDTO, summary="Update a truck")
async def update_truck(
    truck_id: EntityIdPath,
    request: UpdateTruckRequest,
    service: TruckApplicationService = Depends(get_truck_service),
):
    return await service.update_truck(truck_id.lower(), request)


@router.delete("/{truck_id}", response_model=TruckDTO, summary="Delete a truck")
async def delete_truck(
    truck_id: EntityIdPath,
    service: TruckApplicationService = Depends(get_truck_service),
):
    return await service.delete_truck(truck_id.lower())
