"""Application service for Order operations."""

from typing import List, Optional
import logging

from sqlalchemy.ext.asyncio import async_sessionmaker

from core.application.dtos import (
    CreateOrderRequest,
    ListOrdersQuery,
    OrderDTO,
    OrderViewDTO,
    UpdateOrderRequest,
)
from core.application.pipelines import OrderReadPipeline
from core.application.validators import RelationValidator
from core.data.uow import create_uow
from core.domain.entities import Order
from core.domain.errors import EntityNotFoundError


logger = logging.getLogger(__name__)


class OrderApplicationService:
    """
    Application service for orchestrating order operations.

    Responsibilities:
    - Check that referenced users, trucks and locations exist before writing
    - Handle transactions via UoW
    - Delegate listing to the read pipeline
    - Transform between DTOs and domain entities
    """

    def __init__(
        self,
        session_factory: async_sessionmaker,
        relation_validator: RelationValidator,
        read_pipeline: OrderReadPipeline,
    ) -> None:
        """Initialize order application service.

        Args:
            session_factory: SQLAlchemy async session factory
            relation_validator: Existence checks for order references
            read_pipeline: Expanded, paginated order listing
        """
        self._session_factory = session_factory
        self._validator = relation_validator
        self._read_pipeline = read_pipeline

    async def create_order(self, request: CreateOrderRequest) -> OrderDTO:
        """Create a new order.

        Args:
            request: CreateOrderRequest DTO

        Returns:
            OrderDTO with created order details

        Raises:
            ReferenceNotFoundError: If any referenced record does not exist
        """
        await self._validator.validate_order_references(
            user_id=request.user,
            truck_id=request.truck,
            pickup_id=request.pickup,
            dropoff_id=request.dropoff,
        )

        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.insert(
                Order(
                    user=request.user,
                    truck=request.truck,
                    pickup=request.pickup,
                    dropoff=request.dropoff,
                    status=request.status,
                )
            )
            await uow.commit()

        logger.info(f"Order {order.id} created for user {order.user}")
        return OrderDTO.model_validate(order)

    async def update_order(self, order_id: str, request: UpdateOrderRequest) -> OrderDTO:
        """Apply a partial update.

        Only the references present in the request are checked, and only
        once the order itself is known to exist.

        Raises:
            EntityNotFoundError: If the order does not exist
            ReferenceNotFoundError: If a referenced record does not exist
        """
        changes = request.changes()
        async with create_uow(self._session_factory) as uow:
            if await uow.orders.find_by_id(order_id) is None:
                raise EntityNotFoundError("Order", order_id)

            await self._validator.validate_order_references(
                user_id=changes.get("user"),
                truck_id=changes.get("truck"),
                pickup_id=changes.get("pickup"),
                dropoff_id=changes.get("dropoff"),
            )

            order = await uow.orders.update_by_id(order_id, changes)
            if order is None:
                raise EntityNotFoundError("Order", order_id)
            await uow.commit()

        return OrderDTO.model_validate(order)

    async def get_order(self, order_id: str) -> OrderDTO:
        """Get order by ID, references as IDs.

        Raises:
            EntityNotFoundError: If the order does not exist
        """
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.find_by_id(order_id)
        if order is None:
            raise EntityNotFoundError("Order", order_id)
        return OrderDTO.model_validate(order)

    async def delete_order(self, order_id: str) -> OrderDTO:
        async with create_uow(self._session_factory) as uow:
            order = await uow.orders.delete_by_id(order_id)
            if order is None:
                raise EntityNotFoundError("Order", order_id)
            await uow.commit()

        logger.info(f"Order {order_id} deleted")
        return OrderDTO.model_validate(order)

    async def list_orders(self, query: Optional[ListOrdersQuery] = None) -> List[OrderViewDTO]:
        """List orders newest first with references expanded.

        Args:
            query: Status filter and page window

        Returns:
            List of OrderViewDTO
        """
        query = query or ListOrdersQuery()
        return await self._read_pipeline.list_orders(
            status=query.status, page=query.page, limit=query.limit
        )
