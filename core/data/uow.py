"""Unit of Work pattern for atomic transactions."""

from typing import Optional
import logging

from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker

from .errors import store_errors
from .repositories import (
    SqlAlchemyLocationRepository,
    SqlAlchemyOrderRepository,
    SqlAlchemyTruckRepository,
    SqlAlchemyUserRepository,
)


logger = logging.getLogger(__name__)


class UnitOfWork:
    """
    Unit of Work pattern for atomic transactions.

    Responsibilities:
    1. Manage SQLAlchemy session lifecycle
    2. Atomic commit/rollback of all repository operations
    3. Lazy initialization of repositories

    Usage:
        async with create_uow(session_factory) as uow:
            truck = await uow.trucks.insert(truck)
            await uow.commit()
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """Initialize Unit of Work.

        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory
        self._session: Optional[AsyncSession] = None

        # Lazy-loaded repositories
        self._users: Optional[SqlAlchemyUserRepository] = None
        self._trucks: Optional[SqlAlchemyTruckRepository] = None
        self._locations: Optional[SqlAlchemyLocationRepository] = None
        self._orders: Optional[SqlAlchemyOrderRepository] = None

    async def __aenter__(self) -> "UnitOfWork":
        """Start transaction scope."""
        self._session = self._session_factory()
        return self

    async def __aexit__(self, exc_type, exc_val, exc_tb) -> None:
        """Rollback on exception, then release the session."""
        if exc_type is not None:
            logger.debug(f"Rolling back transaction: {exc_type.__name__}")
            await self._session.rollback()
        await self._session.close()

    @property
    def session(self) -> AsyncSession:
        if self._session is None:
            raise RuntimeError("UnitOfWork not initialized. Use async context manager.")
        return self._session

    @property
    def users(self) -> SqlAlchemyUserRepository:
        if self._users is None:
            self._users = SqlAlchemyUserRepository(self.session)
        return self._users

    @property
    def trucks(self) -> SqlAlchemyTruckRepository:
        if self._trucks is None:
            self._trucks = SqlAlchemyTruckRepository(self.session)
        return self._trucks

    @property
    def locations(self) -> SqlAlchemyLocationRepository:
        if self._locations is None:
            self._locations = SqlAlchemyLocationRepository(self.session)
        return self._locations

    @property
    def orders(self) -> SqlAlchemyOrderRepository:
        if self._orders is None:
            self._orders = SqlAlchemyOrderRepository(self.session)
        return self._orders

    async def commit(self) -> None:
        """Commit all pending changes."""
        with store_errors("commit"):
            await self.session.commit()

    async def rollback(self) -> None:
        """Rollback all pending changes."""
        await self.session.rollback()


def create_uow(session_factory: async_sessionmaker) -> UnitOfWork:
    """Create a new Unit of Work instance.

    Args:
        session_factory: SQLAlchemy async session factory

    Returns:
        UnitOfWork instance
    """
    return UnitOfWork(session_factory)
