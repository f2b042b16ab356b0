"""
User management endpoints.

Every route requires a bearer token.
"""
from typing import List

from fastapi import APIRouter, Depends, Response, status

from api.dependencies import get_current_user, get_user_service
from api.routes.params import EntityIdPath
from core.application.dtos import CreateUserRequest, UpdateUserRequest, UserDTO
from core.application.services import UserApplicationService


router = APIRouter(dependencies=[Depends(get_current_user)])


@router.get("", response_model=List[UserDTO], summary="List users")
async def list_users(service: UserApplicationService = Depends(get_user_service)):
    return await service.list_users()


@router.post(
    "",
    response_model=UserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create a user",
)
async def create_user(
    request: CreateUserRequest,
    service: UserApplicationService = Depends(get_user_service),
):
    return await service.create_user(request)


@router.get("/{user_id}", response_model=UserDTO, summary="Get user by ID")
async def get_user(
    user_id: EntityIdPath,
    service: UserApplicationService = Depends(get_user_service),
):
    return await service.get_user(user_id.lower())


@router.put("/{user_id}", response_model=UserDTO, summary="Update a user")
async def update_user(
    user_id: EntityIdPath,
    request: UpdateUserRequest,
    service: UserApplicationService = Depends(get_user_service),
):
    return await service.update_user(user_id.lower(), request)


@router.delete(
    "/{user_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    response_class=Response,
    summary="Delete a user",
)
async def delete_user(
    user_id: EntityIdPath,
    service: UserApplicationService = Depends(get_user_service),
):
    await service.delete_user(user_id.lower())
    return Response(status_code=status.HTTP_204_NO_CONTENT)
