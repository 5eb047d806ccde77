from fastapi.testclient import TestClient


def test_health(client: TestClient):
    response = client.get("/health")

    assert response.status_code == 200
    assert response.json() == {"status": "ok", "service": "vendor-order-console"}


def test_readiness_reports_backend(client: TestClient):
    response = client.get("/health/ready")

    assert response.status_code == 200
    assert response.json()["checks"]["backend"] == "in_memory"
