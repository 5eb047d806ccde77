from datetime import datetime, timezone
from decimal import Decimal
from typing import Any
from uuid import uuid4

from vendor_app.application.interfaces.vendor_backend import (
    EndpointResult,
    QuoteRequest,
    VendorBackend,
)
from vendor_app.domain.errors import UnknownApiError

_DISTANCE_COST_FIELDS = (
    "driver_allowance",
    "permit_charges",
    "hill_charges",
    "toll_charges",
    "night_charges",
)


def _now() -> str:
    return datetime.now(timezone.utc).isoformat()


def _not_found(path: str) -> UnknownApiError:
    return UnknownApiError(
        message="Request failed with status code 404", status_code=404, detail=f"Not Found: {path}"
    )


class StubVendorBackend(VendorBackend):
    """
    In-memory backend for local runs and tests.

    Serves one vehicle owner, its cars and drivers from the organization
    endpoints, and keeps created orders in a list.
    """

    def __init__(self) -> None:
        self.owner: dict[str, Any] = {
            "id": "owner-1",
            "full_name": "Demo Vehicle Owner",
            "primary_mobile": "9000000000",
            "wallet_balance": 1500,
            "organization_id": "org-1",
            "address": "Chennai",
        }
        self.vendor: dict[str, Any] = {
            "id": "vendor-1",
            "full_name": "Drop Cars Pvt Ltd",
            "primary_number": "+91 98765 43210",
            "account_status": "Active",
            "branch_name": "Drop Cars",
        }
        self.cars: list[dict[str, Any]] = [
            {"id": "car-1", "car_name": "Swift", "car_type": "HATCHBACK", "car_number": "TN01AB1234"},
        ]
        self.drivers: list[dict[str, Any]] = [
            {"id": "driver-1", "full_name": "Kumar", "primary_number": "9000000001", "status": "ONLINE"},
        ]
        self.packages: list[dict[str, int]] = [
            {"hours": 4, "km_range": 40},
            {"hours": 8, "km_range": 80},
            {"hours": 12, "km_range": 120},
        ]
        self.orders: list[dict[str, Any]] = []
        self._next_order_id = 1

    def _list_routes(self) -> dict[str, list[dict[str, Any]]]:
        org = self.owner["organization_id"]
        return {
            f"/api/users/cardetails/organization/{org}": self.cars,
            f"/api/users/cardriver/organization/{org}": self.drivers,
        }

    def _find_order(self, order_id: int) -> dict[str, Any]:
        for order in self.orders:
            if order["id"] == order_id:
                return order
        raise _not_found(f"/orders/vendor/{order_id}")

    async def try_get_list(self, path: str) -> EndpointResult:
        routes = self._list_routes()
        if path not in routes:
            return EndpointResult(path=path, error=_not_found(path))
        return EndpointResult(path=path, body=list(routes[path]))

    async def get_vehicle_owner_me(self) -> dict[str, Any]:
        return dict(self.owner)

    async def get_vendor_profile(self) -> dict[str, Any]:
        return dict(self.vendor)

    async def get_pending_orders_all(self) -> Any:
        return [dict(order) for order in self.orders]

    async def get_vendor_orders(self) -> Any:
        return [dict(order) for order in self.orders]

    async def get_order(self, order_id: int) -> dict[str, Any]:
        return dict(self._find_order(order_id))

    async def get_package_hours(self) -> Any:
        return list(self.packages)

    async def request_quote(self, request: QuoteRequest) -> dict[str, Any]:
        return {
            "quote_id": uuid4().hex[:12],
            "trip_type": request.payload.get("trip_type"),
            "estimated_price": float(self._estimate(request)),
            "echo": request.payload,
        }

    async def confirm_order(self, request: QuoteRequest) -> dict[str, Any]:
        order = {
            **request.payload,
            "id": self._next_order_id,
            "trip_status": "PENDING",
            "estimated_price": float(self._estimate(request)),
            "vendor_price": float(self._estimate(request)),
            "order_accept_status": False,
            "data_visibility_vehicle_owner": False,
            "created_at": _now(),
        }
        self._next_order_id += 1
        self.orders.append(order)
        return dict(order)

    async def recreate_order(self, order_id: int, max_time_to_assign_order: int) -> dict[str, Any]:
        source = self._find_order(order_id)
        order = {
            **source,
            "id": self._next_order_id,
            "trip_status": "PENDING",
            "max_time_to_assign_order": max_time_to_assign_order,
            "created_at": _now(),
        }
        self._next_order_id += 1
        self.orders.append(order)
        return dict(order)

    async def set_vehicle_owner_visibility(self, order_id: int, visible: bool) -> dict[str, Any]:
        order = self._find_order(order_id)
        order["data_visibility_vehicle_owner"] = visible
        return {"id": order_id, "data_visibility_vehicle_owner": visible}

    async def cancel_order(self, order_id: int) -> dict[str, Any]:
        order = self._find_order(order_id)
        order["trip_status"] = "CANCELLED"
        order["cancelled_by"] = "VENDOR"
        return {"id": order_id, "trip_status": "CANCELLED"}

    @staticmethod
    def _estimate(request: QuoteRequest) -> Decimal:
        payload = request.payload
        if request.hourly:
            package = payload.get("package_hours") or {}
            return Decimal(str(payload.get("cost_per_hour", 0))) * int(package.get("hours", 0))

        stops = max(len(payload.get("pickup_drop_location", {})) - 1, 1)
        # Flat 100 km per leg.
        total = Decimal(str(payload.get("cost_per_km", 0))) * 100 * stops
        for name in _DISTANCE_COST_FIELDS:
            total += Decimal(str(payload.get(name, 0)))
        return total
