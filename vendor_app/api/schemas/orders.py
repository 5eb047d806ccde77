from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field


class VehicleOwnerResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str
    primary_mobile: str
    secondary_mobile: str | None = None
    wallet_balance: Decimal
    organization_id: str
    address: str
    created_at: str | None = None
    updated_at: str | None = None


class CarResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    car_name: str
    car_type: str
    car_number: str
    car_brand: str | None = None
    car_model: str | None = None
    car_year: int | None = None
    organization_id: str | None = None
    vehicle_owner_id: str | None = None
    car_img_url: str | None = None


class DriverResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: str
    full_name: str
    primary_number: str
    secondary_number: str | None = None
    address: str | None = None
    organization_id: str | None = None
    status: str | None = None


class DashboardSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_cars: int
    total_drivers: int
    wallet_balance: Decimal


class DashboardResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    user_info: VehicleOwnerResponse
    cars: list[CarResponse]
    drivers: list[DriverResponse]
    summary: DashboardSummaryResponse


class OrderSummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int | None = None
    vendor_id: str
    trip_type: str
    car_type: str
    pickup_drop_location: dict[str, str]
    start_date_time: str | None = None
    customer_name: str
    customer_number: str
    trip_status: str
    pick_near_city: str | None = None
    trip_distance: float | None = None
    trip_time: str | None = None
    estimated_price: Decimal | None = None
    vendor_price: Decimal
    order_accept_status: bool
    created_at: str | None = None


class OrderStatsResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_orders: int
    accepted_orders: int
    total_revenue: Decimal


class VendorOrdersResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    vendor: dict[str, Any] | None = None
    orders: list[OrderSummaryResponse]
    stats: OrderStatsResponse


class RecreateOrderRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    max_time_to_assign_order: int | None = Field(default=None, gt=0)


class ToggleVisibilityRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    # Unknown when omitted: the order is fetched first.
    currently_visible: bool | None = None


class ToggleVisibilityResponse(BaseModel):
    order_id: int
    data_visibility_vehicle_owner: bool
