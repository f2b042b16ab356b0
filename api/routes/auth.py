"""
Authentication endpoints.

Registration and login; login returns a bearer token for the /users routes.
"""
from fastapi import APIRouter, Depends, status

from api.dependencies import get_auth_service
from core.application.dtos import CreateUserRequest, LoginRequest, TokenResponse, UserDTO
from core.application.services import AuthApplicationService


router = APIRouter()


@router.post(
    "/register",
    response_model=UserDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Register a user",
)
async def register(
    request: CreateUserRequest,
    service: AuthApplicationService = Depends(get_auth_service),
):
    return await service.register(request)


@router.post(
    "/login",
    response_model=TokenResponse,
    status_code=status.HTTP_200_OK,
    summary="Log in",
    description="Check email and password and return an access token",
)
async def login(
    request: LoginRequest,
    service: AuthApplicationService = Depends(get_auth_service),
):
    return await service.login(request)
