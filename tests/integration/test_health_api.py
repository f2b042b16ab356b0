"""Integration tests for health endpoints."""

from fastapi.testclient import TestClient


def test_health(test_client: TestClient):
    response = test_client.get("/health")

    assert response.status_code == 200
    assert response.json()["status"] == "healthy"


def test_ready_checks_database(test_client: TestClient):
    response = test_client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["database"] == "ok"
