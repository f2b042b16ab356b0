"""
FastAPI Dependencies.

Provides dependency injection for application services.
"""
from __future__ import annotations

import logging
from pathlib import Path
from typing import Any, Dict, Optional

from dotenv import load_dotenv
from fastapi import Depends
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.ext.asyncio import async_sessionmaker

# Load environment variables ONCE before any settings objects are created
_PROJECT_ROOT = Path(__file__).resolve().parents[1]
load_dotenv(dotenv_path=_PROJECT_ROOT / ".env")

from core.application.interfaces import IPasswordHasher, IPlaceLookup, ITokenService
from core.application.pipelines import OrderReadPipeline
from core.application.services import (
    AuthApplicationService,
    LocationApplicationService,
    OrderApplicationService,
    TruckApplicationService,
    UserApplicationService,
)
from core.application.validators import RelationValidator
from core.data.mappers import LocationMapper, TruckMapper, UserMapper
from core.data.repositories import SqlAlchemyExistenceLookup
from core.domain.errors import AuthenticationError
from core.infrastructure.adapters.places import GooglePlacesClient
from core.infrastructure.database import get_session_factory as create_global_session_factory
from core.infrastructure.security import BcryptPasswordHasher, JwtTokenService
from core.settings import get_app_settings

logger = logging.getLogger(__name__)

bearer_scheme = HTTPBearer(auto_error=False)


# =============================================================================
# SINGLETON INSTANCES
# =============================================================================

_session_factory = None
_password_hasher = None
_token_service = None
_place_lookup = None


def get_session_factory() -> async_sessionmaker:
    global _session_factory
    if _session_factory is None:
        _session_factory = create_global_session_factory()
        logger.info("Created database session factory")
    return _session_factory


def get_password_hasher() -> IPasswordHasher:
    global _password_hasher
    if _password_hasher is None:
        _password_hasher = BcryptPasswordHasher(get_app_settings().auth)
    return _password_hasher


def get_token_service() -> ITokenService:
    global _token_service
    if _token_service is None:
        _token_service = JwtTokenService(get_app_settings().auth)
    return _token_service


def get_place_lookup() -> IPlaceLookup:
    global _place_lookup
    if _place_lookup is None:
        _place_lookup = GooglePlacesClient(get_app_settings().google_places)
        logger.info("Created GooglePlacesClient instance")
    return _place_lookup


# =============================================================================
# SERVICES
# =============================================================================

def get_relation_validator(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> RelationValidator:
    return RelationValidator(
        users=SqlAlchemyExistenceLookup(session_factory, UserMapper, "User"),
        trucks=SqlAlchemyExistenceLookup(session_factory, TruckMapper, "Truck"),
        locations=SqlAlchemyExistenceLookup(session_factory, LocationMapper, "Location"),
    )


def get_order_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    relation_validator: RelationValidator = Depends(get_relation_validator),
) -> OrderApplicationService:
    return OrderApplicationService(
        session_factory=session_factory,
        relation_validator=relation_validator,
        read_pipeline=OrderReadPipeline(session_factory),
    )


def get_user_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
) -> UserApplicationService:
    return UserApplicationService(session_factory, password_hasher)


def get_truck_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
) -> TruckApplicationService:
    return TruckApplicationService(
        session_factory,
        users=SqlAlchemyExistenceLookup(session_factory, UserMapper, "User"),
    )


def get_location_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    place_lookup: IPlaceLookup = Depends(get_place_lookup),
) -> LocationApplicationService:
    return LocationApplicationService(session_factory, place_lookup)


def get_auth_service(
    session_factory: async_sessionmaker = Depends(get_session_factory),
    password_hasher: IPasswordHasher = Depends(get_password_hasher),
    token_service: ITokenService = Depends(get_token_service),
) -> AuthApplicationService:
    return AuthApplicationService(session_factory, password_hasher, token_service)


# =============================================================================
# AUTHENTICATION
# =============================================================================

def get_current_user(
    credentials: Optional[HTTPAuthorizationCredentials] = Depends(bearer_scheme),
    auth_service: AuthApplicationService = Depends(get_auth_service),
) -> Dict[str, Any]:
    """
    Claims of the bearer token sent with the request.

    Raises:
        AuthenticationError: If the header is missing or the token is invalid
    """
    if credentials is None:
        raise AuthenticationError("Authentication required", cause="Missing bearer token")
    return auth_service.verify_token(credentials.credentials)


# =============================================================================
# RESET (for testing)
# =============================================================================

def reset_dependencies():
    global _session_factory, _password_hasher, _token_service, _place_lookup

    _session_factory = None
    _password_hasher = None
    _token_service = None
    _place_lookup = None

    logger.info("Dependencies reset")
