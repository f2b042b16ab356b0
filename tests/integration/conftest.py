"""Pytest configuration and fixtures for integration tests."""

import asyncio
from typing import Dict, Generator

import pytest
import pytest_asyncio
from fastapi.testclient import TestClient
from sqlalchemy.ext.asyncio import create_async_engine
from sqlalchemy.pool import NullPool

from api.dependencies import (
    get_password_hasher,
    get_place_lookup,
    get_session_factory,
    reset_dependencies,
)
from api.main import app
from core.infrastructure.database import create_session_factory, init_database
from core.infrastructure.security import BcryptPasswordHasher
from core.settings.modules import AuthSettings
from tests.integration.helpers import create_location, create_truck, register_user
from tests.mocks.mock_place_lookup import MockPlaceLookup


def database_url(tmp_path) -> str:
    # File-backed so concurrent sessions see the same data
    return f"sqlite+aiosqlite:///{tmp_path / 'test.db'}"


@pytest_asyncio.fixture
async def test_engine(tmp_path):
    """Create test database engine with all tables."""
    engine = create_async_engine(database_url(tmp_path), poolclass=NullPool)
    await init_database(engine)
    yield engine
    await engine.dispose()


@pytest_asyncio.fixture
async def test_session_factory(test_engine):
    """Create test session factory."""
    yield create_session_factory(test_engine)


@pytest.fixture
def place_lookup() -> MockPlaceLookup:
    return MockPlaceLookup()


@pytest.fixture
def test_client(tmp_path, place_lookup) -> Generator[TestClient, None, None]:
    """Create FastAPI test client backed by a fresh SQLite file."""
    engine = create_async_engine(database_url(tmp_path), poolclass=NullPool)
    asyncio.run(init_database(engine))
    session_factory = create_session_factory(engine)
    password_hasher = BcryptPasswordHasher(AuthSettings(bcrypt_rounds=4))

    app.dependency_overrides[get_session_factory] = lambda: session_factory
    app.dependency_overrides[get_place_lookup] = lambda: place_lookup
    app.dependency_overrides[get_password_hasher] = lambda: password_hasher

    client = TestClient(app)
    yield client

    # Cleanup
    app.dependency_overrides.clear()
    reset_dependencies()
    asyncio.run(engine.dispose())


@pytest.fixture
def order_refs(test_client: TestClient) -> Dict[str, str]:
    """U1, T1 owned by U1, L1 and L2, created through the API."""
    user = register_user(test_client)
    truck = create_truck(test_client, user["id"])
    pickup = create_location(test_client, "ChIJ-pickup")
    dropoff = create_location(test_client, "ChIJ-dropoff")
    return {
        "user": user["id"],
        "truck": truck["id"],
        "pickup": pickup["id"],
        "dropoff": dropoff["id"],
    }


@pytest.fixture
def auth_headers(test_client: TestClient) -> Dict[str, str]:
    register_user(test_client, name="Admin", email="admin@example.com", password="admin-pass")
    response = test_client.post(
        "/api/v1/auth/login",
        json={"email": "admin@example.com", "password": "admin-pass"},
    )
    assert response.status_code == 200, response.text
    return {"Authorization": f"Bearer {response.json()['token']}"}
