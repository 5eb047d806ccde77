"""
Application layer - vendor order console.

Use cases, DTOs and the ports the infrastructure implements.

Structure:
- use_cases/: dashboard, orders and order composition workflows
- dtos/: Data Transfer Objects returned by the use cases
- interfaces/: ports (backend gateway, auth header provider)
- payloads.py: request shaping for quote/confirm
- fallback.py: first-available endpoint aggregation
"""

from vendor_app.application.dtos import (
    CarDTO,
    DashboardDTO,
    DashboardSummaryDTO,
    DriverDTO,
    OrderFilterDTO,
    OrderStatsDTO,
    OrderSummaryDTO,
    VehicleOwnerDTO,
    VendorHomeDTO,
    VendorOrdersDTO,
)
from vendor_app.application.interfaces import (
    AuthHeaderProvider,
    EndpointResult,
    QuoteRequest,
    StaticTokenAuth,
    VendorBackend,
)

__all__ = [
    # DTOs
    "CarDTO",
    "DashboardDTO",
    "DashboardSummaryDTO",
    "DriverDTO",
    "OrderFilterDTO",
    "OrderStatsDTO",
    "OrderSummaryDTO",
    "VehicleOwnerDTO",
    "VendorHomeDTO",
    "VendorOrdersDTO",
    # Interfaces
    "AuthHeaderProvider",
    "EndpointResult",
    "QuoteRequest",
    "StaticTokenAuth",
    "VendorBackend",
]
