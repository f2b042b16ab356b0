"""Integration tests for Trucks API endpoints."""

from fastapi.testclient import TestClient

from tests.integration.helpers import create_truck, register_user


MISSING_ID = "000000000000000000000000"


def test_create_truck_normalizes_plates(test_client: TestClient):
    user = register_user(test_client)

    response = test_client.post(
        "/api/v1/trucks",
        json={"user": user["id"], "year": "2021", "color": "red", "plates": "abc1234"},
    )

    assert response.status_code == 201
    assert response.json()["plates"] == "ABC1234"
    assert response.json()["user"] == user["id"]


def test_create_truck_for_missing_user(test_client: TestClient):
    response = test_client.post(
        "/api/v1/trucks",
        json={"user": MISSING_ID, "year": "2021", "color": "red", "plates": "ABC1234"},
    )

    assert response.status_code == 404
    assert "Invalid 'user'" in response.json()["message"]


def test_duplicate_plates_conflict_before_owner_check(test_client: TestClient):
    user = register_user(test_client)
    create_truck(test_client, user["id"])

    response = test_client.post(
        "/api/v1/trucks",
        json={"user": MISSING_ID, "year": "2021", "color": "red", "plates": "abc1234"},
    )

    assert response.status_code == 409
    assert response.json()["message"] == "Truck already exists"


def test_list_trucks_by_owner(test_client: TestClient):
    ana = register_user(test_client)
    luis = register_user(test_client, name="Luis Perez", email="luis@example.com")
    create_truck(test_client, ana["id"], plates="AAA1111")
    create_truck(test_client, luis["id"], plates="BBB2222")

    everyone = test_client.get("/api/v1/trucks").json()
    only_luis = test_client.get("/api/v1/trucks", params={"user": luis["id"]}).json()

    assert len(everyone) == 2
    assert [truck["plates"] for truck in only_luis] == ["BBB2222"]


def test_update_and_delete_truck(test_client: TestClient):
    user = register_user(test_client)
    truck = create_truck(test_client, user["id"])

    updated = test_client.put(f"/api/v1/trucks/{truck['id']}", json={"color": "blue"})
    assert updated.status_code == 200
    assert updated.json()["color"] == "blue"
    assert updated.json()["plates"] == "ABC1234"

    moved = test_client.put(f"/api/v1/trucks/{truck['id']}", json={"user": MISSING_ID})
    assert moved.status_code == 404

    deleted = test_client.delete(f"/api/v1/trucks/{truck['id']}")
    assert deleted.status_code == 200
    assert deleted.json()["id"] == truck["id"]
    assert test_client.get(f"/api/v1/trucks/{truck['id']}").status_code == 404


def test_update_missing_truck_reports_truck_first(test_client: TestClient):
    user = register_user(test_client)
    create_truck(test_client, user["id"], plates="AAA1111")
    truck_id = "f" * 24

    response = test_client.put(
        f"/api/v1/trucks/{truck_id}", json={"user": MISSING_ID, "plates": "AAA1111"}
    )

    assert response.status_code == 404
    assert response.json()["message"] == f"Truck with '{truck_id}' not found"


def test_update_plates_conflict(test_client: TestClient):
    user = register_user(test_client)
    create_truck(test_client, user["id"], plates="AAA1111")
    other = create_truck(test_client, user["id"], plates="BBB2222")

    response = test_client.put(f"/api/v1/trucks/{other['id']}", json={"plates": "aaa1111"})

    assert response.status_code == 409
