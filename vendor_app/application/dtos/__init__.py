"""Data Transfer Objects of the application layer."""

from vendor_app.application.dtos.dashboard_dto import (
    CarDTO,
    DashboardDTO,
    DashboardSummaryDTO,
    DriverDTO,
    VehicleOwnerDTO,
)
from vendor_app.application.dtos.order_dto import (
    OrderFilterDTO,
    OrderStatsDTO,
    OrderSummaryDTO,
    VendorHomeDTO,
    VendorOrdersDTO,
)

__all__ = [
    "CarDTO",
    "DashboardDTO",
    "DashboardSummaryDTO",
    "DriverDTO",
    "VehicleOwnerDTO",
    "OrderFilterDTO",
    "OrderStatsDTO",
    "OrderSummaryDTO",
    "VendorHomeDTO",
    "VendorOrdersDTO",
]
