"""
Orders management endpoints.

Provides CRUD operations for orders and the expanded, paginated listing.
"""
from typing import List, Optional

from fastapi import APIRouter, Depends, Query, status

from api.dependencies import get_order_service
from api.routes.params import EntityIdPath
from core.application.dtos import (
    CreateOrderRequest,
    ListOrdersQuery,
    OrderDTO,
    OrderViewDTO,
    UpdateOrderRequest,
)
from core.application.dtos.order_dto import MAX_PAGE, MAX_PAGE_SIZE
from core.application.services import OrderApplicationService
from core.domain.enums import OrderStatus
from core.domain.queries import DEFAULT_LIMIT, DEFAULT_PAGE


router = APIRouter()


# =============================================================================
# LIST ORDERS
# =============================================================================

@router.get(
    "",
    response_model=List[OrderViewDTO],
    status_code=status.HTTP_200_OK,
    summary="List orders",
    description="Orders newest first, with user, truck, pickup and dropoff expanded",
)
async def list_orders(
    status_filter: Optional[OrderStatus] = Query(default=None, alias="status", description="Only orders in this status"),
    page: int = Query(default=DEFAULT_PAGE, ge=1, le=MAX_PAGE, description="1-based page number"),
    limit: int = Query(default=DEFAULT_LIMIT, ge=1, le=MAX_PAGE_SIZE, description="Orders per page"),
    service: OrderApplicationService = Depends(get_order_service),
):
    """
    List orders with pagination.

    **Query Parameters:**
    - `status`: created, in transit or completed
    - `page`: Page number (default: 1)
    - `limit`: Orders per page (1-100, default: 10)

    **Returns:**
    - Orders with references expanded; a deleted reference comes back as null
    """
    return await service.list_orders(ListOrdersQuery(status=status_filter, page=page, limit=limit))


# =============================================================================
# CREATE ORDER
# =============================================================================

@router.post(
    "",
    response_model=OrderDTO,
    status_code=status.HTTP_201_CREATED,
    summary="Create an order",
)
async def create_order(
    request: CreateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    """
    Create an order.

    The user, truck, pickup and dropoff must all exist; the first missing
    one is reported with a 404.
    """
    return await service.create_order(request)


# =============================================================================
# GET / UPDATE / DELETE ORDER
# =============================================================================

@router.get("/{order_id}", response_model=OrderDTO, summary="Get order by ID")
async def get_order(
    order_id: EntityIdPath,
    service: OrderApplicationService = Depends(get_order_service),
):
    return await service.get_order(order_id.lower())


@router.put("/{order_id}", response_model=OrderDTO, summary="Update an order")
async def update_order(
    order_id: EntityIdPath,
    request: UpdateOrderRequest,
    service: OrderApplicationService = Depends(get_order_service),
):
    """Only the references present in the body are checked."""
    return await service.update_order(order_id.lower(), request)


@router.delete("/{order_id}", response_model=OrderDTO, summary="Delete an order")
async def delete_order(
    order_id: EntityIdPath,
    service: OrderApplicationService = Depends(get_order_service),
):
    return await service.delete_order(order_id.lower())
