"""Seeding helpers shared by the integration tests."""

from datetime import datetime, timedelta
from typing import Dict, List

from fastapi.testclient import TestClient

from core.data.models import LocationModel, OrderModel, TruckModel, UserModel
from core.domain.enums import OrderStatus


# =============================================================================
# API HELPERS
# =============================================================================

def register_user(client: TestClient, name: str = "Ana Torres", email: str = "ana@example.com",
                  password: str = "secret123") -> Dict:
    response = client.post(
        "/api/v1/auth/register",
        json={"name": name, "email": email, "password": password},
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_truck(client: TestClient, user_id: str, plates: str = "ABC1234") -> Dict:
    response = client.post(
        "/api/v1/trucks",
        json={"user": user_id, "year": "2020", "color": "white", "plates": plates},
    )
    assert response.status_code == 201, response.text
    return response.json()


def create_location(client: TestClient, place_id: str) -> Dict:
    response = client.post("/api/v1/locations", json={"place_id": place_id})
    assert response.status_code == 201, response.text
    return response.json()


# =============================================================================
# DIRECT SEEDING
# =============================================================================

BASE_TIME = datetime(2024, 1, 1, 12, 0, 0)


async def seed_references(session_factory) -> Dict[str, str]:
    """Insert one user, truck and two locations; return their ids."""
    async with session_factory() as session:
        user = UserModel(name="Ana Torres", email="ana@example.com", password="hashed")
        pickup = LocationModel(address="Pickup St 1", place_id="ChIJ-pickup", latitude=19.4, longitude=-99.1)
        dropoff = LocationModel(address="Dropoff Ave 2", place_id="ChIJ-dropoff", latitude=20.6, longitude=-103.3)
        session.add_all([user, pickup, dropoff])
        await session.flush()

        truck = TruckModel(user_id=user.id, year="2020", color="white", plates="ABC1234")
        session.add(truck)
        await session.commit()

        return {"user": user.id, "truck": truck.id, "pickup": pickup.id, "dropoff": dropoff.id}


async def seed_orders(session_factory, refs: Dict[str, str], statuses) -> List[str]:
    """
    Insert one order per status, each a minute newer than the last.

    Returns the order ids, oldest first.
    """
    ids = []
    async with session_factory() as session:
        for index, status in enumerate(statuses):
            order = OrderModel(
                user_id=refs["user"],
                truck_id=refs["truck"],
                pickup_id=refs["pickup"],
                dropoff_id=refs["dropoff"],
                status=OrderStatus(status).value,
                created_at=BASE_TIME + timedelta(minutes=index),
                updated_at=BASE_TIME + timedelta(minutes=index),
            )
            session.add(order)
            await session.flush()
            ids.append(order.id)
        await session.commit()
    return ids
