"""Integration tests for the order read pipeline against SQLite."""

import pytest
from pydantic import ValidationError
from sqlalchemy import update

from core.application.dtos.order_dto import MAX_PAGE
from core.application.pipelines import OrderReadPipeline
from core.data.models import OrderModel, TruckModel, UserModel
from core.data.uow import create_uow
from core.domain.enums import OrderStatus
from core.domain.queries import LimitStage, LookupStage, MatchStage, build_orders_pipeline
from tests.integration.helpers import BASE_TIME, seed_orders, seed_references


@pytest.mark.asyncio
async def test_filter_by_status_returns_only_matching(test_session_factory):
    """Scenario: 12 created + 3 completed orders."""
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created"] * 12 + ["completed"] * 3)
    pipeline = OrderReadPipeline(test_session_factory)

    completed = await pipeline.list_orders(status=OrderStatus.COMPLETED, page=1, limit=10)
    assert len(completed) == 3
    assert all(order.status == OrderStatus.COMPLETED for order in completed)

    created = await pipeline.list_orders(status="created")
    assert len(created) == 10
    assert all(order.status == OrderStatus.CREATED for order in created)


@pytest.mark.asyncio
async def test_pagination_without_filter(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created"] * 12 + ["completed"] * 3)
    pipeline = OrderReadPipeline(test_session_factory)

    first = await pipeline.list_orders(page=1, limit=10)
    second = await pipeline.list_orders(page=2, limit=10)

    assert len(first) == 10
    assert len(second) == 5
    assert not {o.id for o in first} & {o.id for o in second}


@pytest.mark.asyncio
async def test_second_page_holds_ranks_six_to_ten(test_session_factory):
    refs = await seed_references(test_session_factory)
    ids = await seed_orders(test_session_factory, refs, ["created"] * 12)
    newest_first = list(reversed(ids))

    page = await OrderReadPipeline(test_session_factory).list_orders(page=2, limit=5)

    assert [order.id for order in page] == newest_first[5:10]


@pytest.mark.asyncio
async def test_page_past_the_end_is_empty(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created"] * 3)

    page = await OrderReadPipeline(test_session_factory).list_orders(page=5, limit=10)

    assert page == []


@pytest.mark.asyncio
async def test_last_addressable_page_is_empty(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created"] * 3)

    page = await OrderReadPipeline(test_session_factory).list_orders(page=MAX_PAGE, limit=100)

    assert page == []


@pytest.mark.asyncio
async def test_references_are_expanded(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["in transit"])

    [order] = await OrderReadPipeline(test_session_factory).list_orders()

    assert order.user.id == refs["user"]
    assert order.user.email == "ana@example.com"
    assert order.truck.id == refs["truck"]
    assert order.truck.plates == "ABC1234"
    assert order.pickup.id == refs["pickup"]
    assert order.dropoff.id == refs["dropoff"]
    assert order.status == OrderStatus.IN_TRANSIT


@pytest.mark.asyncio
async def test_password_is_not_exposed(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created"])

    [order] = await OrderReadPipeline(test_session_factory).list_orders()
    payload = order.model_dump(by_alias=True)

    assert "password" not in payload["user"]
    assert "createdAt" in payload and "updatedAt" in payload["user"]


@pytest.mark.asyncio
async def test_deleted_reference_comes_back_empty(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created"])

    async with test_session_factory() as session:
        await session.delete(await session.get(UserModel, refs["user"]))
        await session.delete(await session.get(TruckModel, refs["truck"]))
        await session.commit()

    [order] = await OrderReadPipeline(test_session_factory).list_orders()

    assert order.user is None
    assert order.truck is None
    assert order.pickup.id == refs["pickup"]
    assert order.dropoff.id == refs["dropoff"]


@pytest.mark.asyncio
async def test_same_pickup_and_dropoff_expand_independently(test_session_factory):
    refs = await seed_references(test_session_factory)
    refs["dropoff"] = refs["pickup"]
    await seed_orders(test_session_factory, refs, ["created"])

    [order] = await OrderReadPipeline(test_session_factory).list_orders()

    assert order.pickup.id == order.dropoff.id == refs["pickup"]


@pytest.mark.asyncio
async def test_listing_is_idempotent(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created", "completed"] * 4)
    pipeline = OrderReadPipeline(test_session_factory)
    assert await pipeline.list_orders(page=1, limit=5) == await pipeline.list_orders(page=1, limit=5)


@pytest.mark.asyncio
async def test_created_at_ties_are_broken_by_id(test_session_factory):
    refs = await seed_references(test_session_factory)
    ids = await seed_orders(test_session_factory, refs, ["created"] * 6)

    async with test_session_factory() as session:
        await session.execute(update(OrderModel).values(created_at=BASE_TIME))
        await session.commit()

    listed = await OrderReadPipeline(test_session_factory).list_orders(limit=6)

    assert [order.id for order in listed] == sorted(ids, reverse=True)


@pytest.mark.asyncio
async def test_aggregate_rejects_stages_after_lookup(test_session_factory):
    stages = build_orders_pipeline()
    stages.append(LimitStage(count=1))

    async with create_uow(test_session_factory) as uow:
        with pytest.raises(ValueError):
            await uow.orders.aggregate(stages)


@pytest.mark.asyncio
async def test_aggregate_runs_a_custom_pipeline(test_session_factory):
    refs = await seed_references(test_session_factory)
    await seed_orders(test_session_factory, refs, ["created", "completed"])

    stages = [
        MatchStage(conditions={"status": "completed"}),
        LookupStage(from_collection="locations", local_field="pickup", as_field="pickup"),
    ]
    async with create_uow(test_session_factory) as uow:
        rows = await uow.orders.aggregate(stages)

    assert len(rows) == 1
    assert rows[0].order.status == OrderStatus.COMPLETED
    assert rows[0].pickup.id == refs["pickup"]
    assert rows[0].user is None


@pytest.mark.asyncio
async def test_integral_strings_are_accepted_and_bad_windows_rejected(test_session_factory):
    refs = await seed_references(test_session_factory)
    ids = await seed_orders(test_session_factory, refs, ["created"] * 4)
    pipeline = OrderReadPipeline(test_session_factory)

    page = await pipeline.list_orders(page="2", limit="3")
    assert [order.id for order in page] == [ids[0]]

    for window in ({"page": 0}, {"limit": 0}, {"limit": 101}, {"page": "x"}, {"page": 10**19}):
        with pytest.raises(ValidationError):
            await pipeline.list_orders(**window)
