"""Repository interfaces shared by every collection."""

from abc import ABC, abstractmethod
from typing import Any, Dict, Generic, List, Optional, TypeVar

T = TypeVar("T")


class EntityRepository(ABC, Generic[T]):
    """Abstract repository for a single collection."""

    @abstractmethod
    async def find_by_id(self, entity_id: str) -> Optional[T]:
        """Retrieve a record by id.

        Args:
            entity_id: Record identifier

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_one_by(self, **filters: Any) -> Optional[T]:
        """Retrieve the first record whose fields equal the given values.

        Args:
            **filters: Field equality filters

        Returns:
            Entity if found, None otherwise
        """
        pass

    @abstractmethod
    async def find_all(self, **filters: Any) -> List[T]:
        """List records matching field equality filters.

        Args:
            **filters: Field equality filters (all records when empty)

        Returns:
            List of entities
        """
        pass

    @abstractmethod
    async def insert(self, entity: T) -> T:
        """Insert a new record.

        Args:
            entity: Entity to persist

        Returns:
            Stored entity with id and timestamps set
        """
        pass

    @abstractmethod
    async def update_by_id(self, entity_id: str, changes: Dict[str, Any]) -> Optional[T]:
        """Apply field changes to a record.

        Args:
            entity_id: Record identifier
            changes: Field name to new value

        Returns:
            Updated entity, None if the record does not exist
        """
        pass

    @abstractmethod
    async def delete_by_id(self, entity_id: str) -> Optional[T]:
        """Delete a record.

        Args:
            entity_id: Record identifier

        Returns:
            Deleted entity, None if the record does not exist
        """
        pass


class ExistenceLookup(ABC):
    """Answers whether a record exists in one collection."""

    kind: str = "Entity"

    @abstractmethod
    async def exists(self, entity_id: str) -> bool:
        """Check if a record exists.

        Args:
            entity_id: Record identifier

        Returns:
            True if exists, False otherwise
        """
        pass
