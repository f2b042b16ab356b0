"""Application service for registration, login and tokens."""

from typing import Any, Dict
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import CreateUserRequest, LoginRequest, TokenResponse, UserDTO
from core.application.interfaces import IPasswordHasher, ITokenService
from core.data.uow import create_uow
from core.domain.entities import User
from core.domain.errors import AuthenticationError

from .user_service import UserApplicationService


logger = logging.getLogger(__name__)

INVALID_CREDENTIALS = "Invalid email or password"


class AuthApplicationService:
    """Registration and credential checks on top of the user store."""

    def __init__(
        self,
        session_factory: async_sessionmaker,
        password_hasher: IPasswordHasher,
        token_service: ITokenService,
    ) -> None:
        """Initialize auth application service.

        Args:
            session_factory: SQLAlchemy async session factory
            password_hasher: Password hashing implementation
            token_service: Token signer/verifier
        """
        self._session_factory = session_factory
        self._tokens = token_service
        self._users = UserApplicationService(session_factory, password_hasher)

    async def register(self, request: CreateUserRequest) -> UserDTO:
        return await self._users.create_user(request)

    async def login(self, request: LoginRequest) -> TokenResponse:
        """Check credentials and issue an auth token.

        Unknown email and wrong password fail the same way.

        Raises:
            AuthenticationError: If the credentials do not match
        """
        async with create_uow(self._session_factory) as uow:
            user = await uow.users.find_one_by(email=request.email.lower())

        if user is None or not await self._users.verify_password(request.password, user.password):
            logger.warning(f"Failed login for {request.email}")
            raise AuthenticationError(INVALID_CREDENTIALS)

        return TokenResponse(token=self.issue_token(user))

    def issue_token(self, user: User, token_type: str = "auth") -> str:
        return self._tokens.issue(
            {"sub": user.id, "name": user.name, "email": user.email},
            token_type=token_type,
        )

    def verify_token(self, token: str) -> Dict[str, Any]:
        """Decode a bearer token.

        Raises:
            AuthenticationError: If the token is invalid or expired
        """
        return self._tokens.verify(token)
