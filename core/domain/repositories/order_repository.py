"""Repository interface for the Order aggregate."""

from abc import abstractmethod
from typing import List, Sequence

from ..entities.order import ExpandedOrder, Order
from ..queries import PipelineStage
from .entity_repository import EntityRepository


class OrderRepository(EntityRepository[Order]):
    """Abstract repository for Order persistence and listing."""

    @abstractmethod
    async def aggregate(self, stages: Sequence[PipelineStage]) -> List[ExpandedOrder]:
        """Run a read pipeline over the orders collection.

        Args:
            stages: Pipeline built with PipelineBuilder

        Returns:
            Orders with their references expanded, in pipeline order
        """
        pass
