"""Application service for User operations."""

from typing import List
import asyncio
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import CreateUserRequest, UpdateUserRequest, UserDTO
from core.application.interfaces import IPasswordHasher
from core.data.uow import UnitOfWork, create_uow
from core.domain.entities import User
from core.domain.errors import ConflictError, EntityNotFoundError


logger = logging.getLogger(__name__)


class UserApplicationService:
    """
    Application service for user CRUD.

    Emails are unique case-insensitively; passwords are hashed before they
    reach the repository and never leave this service.
    """

    def __init__(self, session_factory: async_sessionmaker, password_hasher: IPasswordHasher) -> None:
        """Initialize user application service.

        Args:
            session_factory: SQLAlchemy async session factory
            password_hasher: Password hashing implementation
        """
        self._session_factory = session_factory
        self._hasher = password_hasher

    async def create_user(self, request: CreateUserRequest) -> UserDTO:
        """Create a new user.

        Raises:
            ConflictError: If the email is already registered
        """
        email = request.email.lower()
        password_hash = await self.hash_password(request.password)
        async with create_uow(self._session_factory) as uow:
            await self._ensure_email_free(uow, email)

            user = await uow.users.insert(
                User(name=request.name, email=email, password=password_hash)
            )
            await uow.commit()

        logger.info(f"Registered user {user.id}")
        return UserDTO.model_validate(user)

    async def list_users(self) -> List[UserDTO]:
        async with create_uow(self._session_factory) as uow:
            users = await uow.users.find_all()
        return [UserDTO.model_validate(user) for user in users]

    async def get_user(self, user_id: str) -> UserDTO:
        """Get user by ID.

        Raises:
            EntityNotFoundError: If the user does not exist
        """
        async with create_uow(self._session_factory) as uow:
            user = await uow.users.find_by_id(user_id)
        if user is None:
            raise EntityNotFoundError("User", user_id)
        return UserDTO.model_validate(user)

    async def update_user(self, user_id: str, request: UpdateUserRequest) -> UserDTO:
        """Apply a partial update.

        Raises:
            EntityNotFoundError: If the user does not exist
            ConflictError: If the new email belongs to another user
        """
        changes = request.changes()
        if "email" in changes:
            changes["email"] = changes["email"].lower()
        if "password" in changes:
            changes["password"] = await self.hash_password(changes["password"])

        async with create_uow(self._session_factory) as uow:
            if await uow.users.find_by_id(user_id) is None:
                raise EntityNotFoundError("User", user_id)
            if "email" in changes:
                await self._ensure_email_free(uow, changes["email"], exclude_id=user_id)

            user = await uow.users.update_by_id(user_id, changes)
            if user is None:
                raise EntityNotFoundError("User", user_id)
            await uow.commit()

        return UserDTO.model_validate(user)

    async def delete_user(self, user_id: str) -> UserDTO:
        """Delete user by ID.

        Trucks and orders referencing the user are left in place.

        Raises:
            EntityNotFoundError: If the user does not exist
        """
        async with create_uow(self._session_factory) as uow:
            user = await uow.users.delete_by_id(user_id)
            if user is None:
                raise EntityNotFoundError("User", user_id)
            await uow.commit()

        return UserDTO.model_validate(user)

    @staticmethod
    async def _ensure_email_free(uow: UnitOfWork, email: str, exclude_id: str = None) -> None:
        existing = await uow.users.find_one_by(email=email)
        if existing is not None and existing.id != exclude_id:
            raise ConflictError("User", "email", email)

    async def hash_password(self, password: str) -> str:
        """Hash in the default executor, off the event loop."""
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._hasher.hash, password)

    async def verify_password(self, password: str, password_hash: str) -> bool:
        loop = asyncio.get_running_loop()
        return await loop.run_in_executor(None, self._hasher.verify, password, password_hash)
