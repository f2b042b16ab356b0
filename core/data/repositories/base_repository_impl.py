"""Generic SQLAlchemy repository for single-collection records."""

from typing import Any, Dict, List, Optional, Type

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker
import logging

from core.domain.repositories import EntityRepository, ExistenceLookup
from core.domain.value_objects import generate_entity_id

from ..errors import store_errors
from ..mappers import EntityMapper


logger = logging.getLogger(__name__)


class SqlAlchemyRepository(EntityRepository):
    """
    SQLAlchemy implementation of EntityRepository.

    Subclasses set `mapper` (and `kind` for error messages). Writes are
    flushed, never committed: the Unit of Work owns the transaction.
    """

    mapper: Type[EntityMapper] = EntityMapper
    kind: str = "Record"

    def __init__(self, session: AsyncSession) -> None:
        """Initialize repository with SQLAlchemy session.

        Args:
            session: SQLAlchemy async session
        """
        self._session = session

    @property
    def model(self):
        return self.mapper.model

    def _where(self, query, filters: Dict[str, Any]):
        for field, value in self.mapper.to_columns(filters).items():
            query = query.where(getattr(self.model, field) == value)
        return query

    async def _get_model(self, entity_id: str):
        with store_errors(f"{self.kind} lookup", self.kind):
            return await self._session.get(self.model, entity_id)

    async def find_by_id(self, entity_id: str):
        model = await self._get_model(entity_id)
        if model is None:
            logger.debug(f"{self.kind} not found: {entity_id}")
            return None
        return self.mapper.to_domain(model)

    async def find_one_by(self, **filters: Any):
        with store_errors(f"{self.kind} lookup", self.kind):
            result = await self._session.execute(
                self._where(select(self.model), filters).limit(1)
            )
            model = result.scalar_one_or_none()
        return self.mapper.to_domain(model) if model is not None else None

    async def find_all(self, **filters: Any) -> List:
        with store_errors(f"{self.kind} listing", self.kind):
            result = await self._session.execute(
                self._where(select(self.model), filters).order_by(
                    self.model.created_at.desc(), self.model.id.desc()
                )
            )
            models = result.scalars().all()
        return [self.mapper.to_domain(model) for model in models]

    async def insert(self, entity):
        if entity.id is None:
            entity.id = generate_entity_id()

        model = self.mapper.to_persistence(entity)
        with store_errors(f"{self.kind} insert", self.kind):
            self._session.add(model)
            await self._session.flush()  # Propagate to DB without committing
            await self._session.refresh(model)

        logger.info(f"✅ Created {self.kind.lower()}: {model.id}")
        return self.mapper.to_domain(model)

    async def update_by_id(self, entity_id: str, changes: Dict[str, Any]):
        model = await self._get_model(entity_id)
        if model is None:
            return None

        with store_errors(f"{self.kind} update", self.kind):
            for column, value in self.mapper.to_columns(changes).items():
                setattr(model, column, value)
            await self._session.flush()
            await self._session.refresh(model)

        logger.info(f"✅ Updated {self.kind.lower()}: {entity_id}")
        return self.mapper.to_domain(model)

    async def delete_by_id(self, entity_id: str):
        model = await self._get_model(entity_id)
        if model is None:
            logger.warning(f"{self.kind} not found for deletion: {entity_id}")
            return None

        entity = self.mapper.to_domain(model)
        with store_errors(f"{self.kind} delete", self.kind):
            await self._session.delete(model)
            await self._session.flush()

        logger.info(f"✅ Deleted {self.kind.lower()}: {entity_id}")
        return entity


class SqlAlchemyExistenceLookup(ExistenceLookup):
    """
    Existence check against one table.

    Each call opens its own short-lived session, so several lookups can run
    concurrently without sharing a session.
    """

    def __init__(self, session_factory: async_sessionmaker, mapper: Type[EntityMapper], kind: str) -> None:
        self._session_factory = session_factory
        self._model = mapper.model
        self.kind = kind

    async def exists(self, entity_id: str) -> bool:
        with store_errors(f"{self.kind} existence check", self.kind):
            async with self._session_factory() as session:
                result = await session.execute(
                    select(self._model.id).where(self._model.id == entity_id)
                )
                return result.scalar_one_or_none() is not None
