"""
Location management endpoints.

Locations are created from a place ID; address and coordinates are looked up.
"""
from typing import List

from fastapi import APIRouter, Depends, status

from api.dependencies import get_location_service
from api.routes.params import EntityIdPath
from core.application.dtos import LocationDTO, LocationRequest
from core.application.services import LocationApplicationService


router = APIRouter()


@router.get("", response_model=List[LocationDTO], summary="List locations")
async def list_locations(service: LocationApplicationService = Depends(get_location_service)):
    return await service.list_locations()


@router.post(
    "",
    response_model=LocationDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a location",
    description="Resolve a place ID and store its address and coordinates",
)
async def create_location(
    request: LocationRequest,
    service: LocationApplicationService = Depends(get_location_service),
):
    return await service.create_location(request)


@router.get("/{location_id}", response_model=LocationDTO, summary="Get location by ID")
async def get_location(
    location_id: EntityIdPath,
    service: LocationApplicationService = Depends(get_location_service),
):
    return await service.get_location(location_id.lower())


@router.put("/{location_id}", response_model=LocationDTO, summary="Update a location")
async def update_location(
    location_id: EntityIdPath,
    request: LocationRequest,
    service: LocationApplicationService = Depends(get_location_service),
):
    return await service.update_location(location_id.lower(), request)


@router.delete("/{location_id}", response_model=LocationDTO, summary="Delete a location")
async def delete_location(
    location_id: EntityIdPath,
    service: LocationApplicationService = Depends(get_location_service),
):
    return await service.delete_location(location_id.lower())
