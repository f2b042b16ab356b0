"""Order listing with references expanded."""

from typing import List, Optional

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import (
    ListOrdersQuery,
    LocationDTO,
    OrderViewDTO,
    TruckDTO,
    UserDTO,
)
from core.data.uow import create_uow
from core.domain.entities import ExpandedOrder
from core.domain.enums import OrderStatus
from core.domain.queries import DEFAULT_LIMIT, DEFAULT_PAGE, build_orders_pipeline


class OrderReadPipeline:
    """
    Filter -> sort -> page -> expand, as one query.

    Orders are filtered by status, sorted newest first and cut to the page
    window before the user, truck, pickup and dropoff records are joined in.
    A reference whose record is gone comes back as None.
    """

    def __init__(self, session_factory: async_sessionmaker) -> None:
        """
        Args:
            session_factory: SQLAlchemy async session factory
        """
        self._session_factory = session_factory

    async def list_orders(
        self,
        status: Optional[OrderStatus] = None,
        page: int = DEFAULT_PAGE,
        limit: int = DEFAULT_LIMIT,
    ) -> List[OrderViewDTO]:
        """
        Args:
            status: Only orders in this status (all when None)
            page: 1-based page number; integral strings are accepted
            limit: Orders per page, 1 to 100

        Returns:
            Expanded orders, newest first

        Raises:
            ValidationError: If the status or page window is invalid
        """
        query = ListOrdersQuery(status=status, page=page, limit=limit)
        stages = build_orders_pipeline(status=query.status, page=query.page, limit=query.limit)

        async with create_uow(self._session_factory) as uow:
            rows = await uow.orders.aggregate(stages)

        return [self._to_view(row) for row in rows]

    @staticmethod
    def _to_view(row: ExpandedOrder) -> OrderViewDTO:
        order = row.order
        return OrderViewDTO(
            id=order.id,
            user=UserDTO.model_validate(row.user) if row.user else None,
            truck=TruckDTO.model_validate(row.truck) if row.truck else None,
            pickup=LocationDTO.model_validate(row.pickup) if row.pickup else None,
            dropoff=LocationDTO.model_validate(row.dropoff) if row.dropoff else None,
            status=order.status,
            created_at=order.created_at,
            updated_at=order.updated_at,
        )
