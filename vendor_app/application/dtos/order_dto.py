"""DTOs for orders listed on the vendor and driver screens."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


@dataclass
class OrderSummaryDTO:
    """DTO for an order row (pending lists and the vendor overview)."""

    id: int | None = None
    vendor_id: str = ""
    trip_type: str = ""
    car_type: str = ""
    pickup_drop_location: dict[str, str] = field(default_factory=dict)
    start_date_time: str | None = None
    customer_name: str = ""
    customer_number: str = ""
    trip_status: str = ""
    pick_near_city: str | None = None
    trip_distance: float | None = None
    trip_time: str | None = None
    estimated_price: Decimal | None = None
    vendor_price: Decimal = Decimal("0")
    platform_fees_percent: Decimal | None = None
    order_accept_status: bool = False
    created_at: str | None = None
    raw: dict[str, Any] = field(default_factory=dict, repr=False)

    @property
    def normalized_status(self) -> str:
        return self.trip_status.strip().upper()

    @property
    def is_pending(self) -> bool:
        return self.normalized_status == "PENDING"

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "OrderSummaryDTO":
        status = data.get("trip_status") or data.get("status") or ""
        locations = data.get("pickup_drop_location") or {}
        if not isinstance(locations, dict):
            locations = {}
        return cls(
            id=data.get("id", data.get("order_id")),
            vendor_id=str(data.get("vendor_id") or ""),
            trip_type=data.get("trip_type") or "",
            car_type=data.get("car_type") or "",
            pickup_drop_location={str(k): str(v) for k, v in locations.items()},
            start_date_time=data.get("start_date_time"),
            customer_name=data.get("customer_name") or "",
            customer_number=str(data.get("customer_number") or ""),
            trip_status=str(status),
            pick_near_city=data.get("pick_near_city"),
            trip_distance=data.get("trip_distance"),
            trip_time=data.get("trip_time"),
            estimated_price=_optional_decimal(data.get("estimated_price")),
            vendor_price=_optional_decimal(data.get("vendor_price")) or Decimal("0"),
            platform_fees_percent=_optional_decimal(data.get("platform_fees_percent")),
            order_accept_status=bool(data.get("order_accept_status")),
            created_at=data.get("created_at"),
            raw=data,
        )


@dataclass
class OrderStatsDTO:
    total_orders: int = 0
    accepted_orders: int = 0
    total_revenue: Decimal = Decimal("0")


@dataclass
class OrderFilterDTO:
    """Filters of the vendor orders screen. "all" disables a filter."""

    search: str = ""
    status: str = "all"
    trip_type: str = "all"
    car_type: str = "all"
    accept_status: str = "all"


@dataclass
class VendorOrdersDTO:
    orders: list[OrderSummaryDTO] = field(default_factory=list)
    stats: OrderStatsDTO = field(default_factory=OrderStatsDTO)


@dataclass
class VendorHomeDTO:
    """Vendor profile and orders, loaded together."""

    vendor: dict[str, Any] | None = None
    orders: VendorOrdersDTO = field(default_factory=VendorOrdersDTO)


def _optional_decimal(value: Any) -> Decimal | None:
    if value is None or value == "":
        return None
    return Decimal(str(value))
