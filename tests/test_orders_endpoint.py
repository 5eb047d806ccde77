import httpx
from fastapi.testclient import TestClient

from vendor_app.api.dependencies import get_backend
from vendor_app.application.interfaces.auth import StaticTokenAuth
from vendor_app.domain.errors import AuthError, NetworkError
from vendor_app.infrastructure.gateways.vendor_backend_http import VendorBackendHTTP
from vendor_app.main import app


def _seed_orders(stub_backend):
    stub_backend.orders.extend(
        [
            {
                "id": 1,
                "trip_type": "Oneway",
                "car_type": "SEDAN",
                "customer_name": "Raj",
                "customer_number": "9999999999",
                "pickup_drop_location": {"0": "Chennai", "1": "Bangalore"},
                "trip_status": "PENDING",
                "vendor_price": 1200,
                "order_accept_status": False,
                "data_visibility_vehicle_owner": False,
                "created_at": "2026-01-01T10:00:00",
            },
            {
                "id": 2,
                "trip_type": "Round Trip",
                "car_type": "SUV",
                "customer_name": "Anita",
                "customer_number": "8888888888",
                "pickup_drop_location": {"0": "Madurai", "1": "Trichy", "2": "Madurai"},
                "trip_status": "COMPLETED",
                "vendor_price": 800,
                "order_accept_status": True,
                "data_visibility_vehicle_owner": True,
                "created_at": "2026-01-02T10:00:00",
            },
        ]
    )
    stub_backend._next_order_id = 3


def test_dashboard(client: TestClient):
    response = client.get("/api/v1/dashboard")

    assert response.status_code == 200
    data = response.json()
    assert data["user_info"]["full_name"] == "Demo Vehicle Owner"
    assert data["summary"]["total_cars"] == 1
    assert data["summary"]["total_drivers"] == 1
    assert data["cars"][0]["car_number"] == "TN01AB1234"


def test_dashboard_auth_failure_maps_to_401(client: TestClient, stub_backend, monkeypatch):
    async def fail():
        raise AuthError()

    monkeypatch.setattr(stub_backend, "get_vehicle_owner_me", fail)

    response = client.get("/api/v1/dashboard")

    assert response.status_code == 401
    assert response.json() == {
        "detail": "Authentication failed. Please login again.",
        "code": "AUTH_FAILED",
    }


def test_dashboard_401_from_backend_uses_fixed_message(client: TestClient):
    calls = []

    def handler(request: httpx.Request) -> httpx.Response:
        calls.append(request.url.path)
        return httpx.Response(401, json={"detail": "Not authenticated"})

    backend = VendorBackendHTTP(
        base_url="http://test.backend",
        auth=StaticTokenAuth("expired-token"),
        client=httpx.AsyncClient(
            transport=httpx.MockTransport(handler), base_url="http://test.backend"
        ),
    )
    app.dependency_overrides[get_backend] = lambda: backend

    response = client.get("/api/v1/dashboard")

    assert response.status_code == 401
    assert response.json() == {
        "detail": "Authentication failed. Please login again.",
        "code": "AUTH_FAILED",
    }
    assert calls == ["/api/users/vehicle-owner/me"]


def test_pending_orders(client: TestClient, stub_backend):
    _seed_orders(stub_backend)

    response = client.get("/api/v1/orders/pending")

    assert response.status_code == 200
    assert [order["id"] for order in response.json()] == [1]


def test_pending_orders_network_failure_maps_to_503(client: TestClient, stub_backend, monkeypatch):
    async def fail():
        raise NetworkError()

    monkeypatch.setattr(stub_backend, "get_pending_orders_all", fail)

    response = client.get("/api/v1/orders/pending")

    assert response.status_code == 503
    assert response.json()["code"] == "NETWORK_ERROR"


def test_vendor_orders_with_filters(client: TestClient, stub_backend):
    _seed_orders(stub_backend)

    everything = client.get("/api/v1/orders/vendor").json()
    assert [order["id"] for order in everything["orders"]] == [2, 1]
    assert everything["vendor"]["full_name"] == "Drop Cars Pvt Ltd"
    assert everything["stats"]["total_orders"] == 2
    assert everything["stats"]["accepted_orders"] == 1

    filtered = client.get("/api/v1/orders/vendor", params={"status": "PENDING", "search": "raj"}).json()
    assert [order["id"] for order in filtered["orders"]] == [1]
    assert filtered["stats"]["total_orders"] == 2


def test_order_details_and_unknown_order(client: TestClient, stub_backend):
    _seed_orders(stub_backend)

    assert client.get("/api/v1/orders/1").json()["customer_name"] == "Raj"

    missing = client.get("/api/v1/orders/99")
    assert missing.status_code == 502
    assert missing.json()["code"] == "UNKNOWN_API_ERROR"


def test_recreate_order(client: TestClient, stub_backend):
    _seed_orders(stub_backend)

    response = client.post("/api/v1/orders/2/recreate")

    assert response.status_code == 201
    created = response.json()
    assert created["id"] == 3
    assert created["trip_status"] == "PENDING"
    assert created["max_time_to_assign_order"] == 30


def test_toggle_visibility(client: TestClient, stub_backend):
    _seed_orders(stub_backend)

    response = client.post("/api/v1/orders/2/visibility")

    assert response.json() == {"order_id": 2, "data_visibility_vehicle_owner": False}
    assert stub_backend.orders[1]["data_visibility_vehicle_owner"] is False


def test_cancel_pending_order(client: TestClient, stub_backend):
    _seed_orders(stub_backend)

    response = client.post("/api/v1/orders/1/cancel")

    assert response.status_code == 200
    assert stub_backend.orders[0]["trip_status"] == "CANCELLED"


def test_cancel_completed_order_is_a_conflict(client: TestClient, stub_backend):
    _seed_orders(stub_backend)

    response = client.post("/api/v1/orders/2/cancel")

    assert response.status_code == 409
    assert response.json()["code"] == "ORDER_NOT_CANCELLABLE"
    assert stub_backend.orders[1]["trip_status"] == "COMPLETED"
