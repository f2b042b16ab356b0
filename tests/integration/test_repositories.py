"""Integration tests for SQLAlchemy repositories and existence lookups."""

import pytest
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from core.application.validators import RelationValidator
from core.data.mappers import LocationMapper, TruckMapper, UserMapper
from core.data.repositories import SqlAlchemyExistenceLookup
from core.data.uow import create_uow
from core.domain.entities import Truck, User
from core.domain.errors import ConflictError, ReferenceNotFoundError, StoreUnavailableError
from core.infrastructure.database import create_session_factory
from tests.integration.helpers import seed_references


MISSING_ID = "000000000000000000000000"


def relation_validator(session_factory) -> RelationValidator:
    return RelationValidator(
        users=SqlAlchemyExistenceLookup(session_factory, UserMapper, "User"),
        trucks=SqlAlchemyExistenceLookup(session_factory, TruckMapper, "Truck"),
        locations=SqlAlchemyExistenceLookup(session_factory, LocationMapper, "Location"),
    )


@pytest.mark.asyncio
async def test_insert_generates_id_and_timestamps(test_session_factory):
    async with create_uow(test_session_factory) as uow:
        user = await uow.users.insert(User(name="Ana", email=" Ana@Example.com ", password="hashed"))
        await uow.commit()

    assert len(user.id) == 24
    assert user.email == "ana@example.com"
    assert user.created_at is not None and user.updated_at is not None


@pytest.mark.asyncio
async def test_uncommitted_writes_are_rolled_back(test_session_factory):
    with pytest.raises(RuntimeError):
        async with create_uow(test_session_factory) as uow:
            await uow.users.insert(User(name="Ana", email="ana@example.com", password="hashed"))
            raise RuntimeError("boom")

    async with create_uow(test_session_factory) as uow:
        assert await uow.users.find_all() == []


@pytest.mark.asyncio
async def test_unique_violation_becomes_conflict(test_session_factory):
    refs = await seed_references(test_session_factory)

    with pytest.raises(ConflictError):
        async with create_uow(test_session_factory) as uow:
            await uow.trucks.insert(Truck(user=refs["user"], year="2020", color="red", plates="ABC1234"))


@pytest.mark.asyncio
async def test_find_all_filters_by_domain_field(test_session_factory):
    refs = await seed_references(test_session_factory)

    async with create_uow(test_session_factory) as uow:
        owned = await uow.trucks.find_all(user=refs["user"])
        others = await uow.trucks.find_all(user=MISSING_ID)

    assert [truck.id for truck in owned] == [refs["truck"]]
    assert others == []


@pytest.mark.asyncio
async def test_update_and_delete_missing_return_none(test_session_factory):
    async with create_uow(test_session_factory) as uow:
        assert await uow.orders.update_by_id(MISSING_ID, {"status": "completed"}) is None
        assert await uow.orders.delete_by_id(MISSING_ID) is None


@pytest.mark.asyncio
async def test_existence_lookups(test_session_factory):
    refs = await seed_references(test_session_factory)
    users = SqlAlchemyExistenceLookup(test_session_factory, UserMapper, "User")

    assert await users.exists(refs["user"])
    assert not await users.exists(MISSING_ID)


@pytest.mark.asyncio
async def test_validator_against_database(test_session_factory):
    refs = await seed_references(test_session_factory)
    validator = relation_validator(test_session_factory)

    await validator.validate_order_references(refs["user"], refs["truck"], refs["pickup"], refs["dropoff"])

    with pytest.raises(ReferenceNotFoundError) as exc_info:
        await validator.validate_order_references(refs["user"], refs["truck"], MISSING_ID, refs["dropoff"])
    assert exc_info.value.field == "pickup"


@pytest.mark.asyncio
async def test_store_failure_is_not_reported_as_missing(tmp_path):
    # No tables were created in this database
    engine = create_async_engine(f"sqlite+aiosqlite:///{tmp_path / 'empty.db'}", poolclass=NullPool)
    validator = relation_validator(create_session_factory(engine))

    try:
        with pytest.raises(StoreUnavailableError):
            await validator.validate_order_references(MISSING_ID, MISSING_ID, MISSING_ID, MISSING_ID)
    finally:
        await engine.dispose()
