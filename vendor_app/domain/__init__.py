"""
Domain layer - vendor order console.

Pure business rules with no framework dependencies.

Structure:
- entities/: LocationSet, pricing profiles, OrderForm
- value_objects/: TripType and its policy table, HourlyPackage, CarType,
  DistributionTarget
- errors.py: domain exceptions, including the backend error taxonomy
"""

from vendor_app.domain.entities import (
    LocationSet,
    OrderForm,
    PricingFields,
    fields_for,
)
from vendor_app.domain.errors import (
    ApiError,
    AuthError,
    DomainError,
    FormSessionNotFoundError,
    InvalidTransitionError,
    NetworkError,
    OrderNotCancellableError,
    ReadOnlyLocationError,
    ReorderNotAllowedError,
    RequestTimeoutError,
    ServerError,
    UnknownApiError,
    ValidationError,
)
from vendor_app.domain.value_objects import (
    CarType,
    DistributionTarget,
    HourlyPackage,
    SendTo,
    TripPolicy,
    TripType,
    policy_for,
)

__all__ = [
    # Entities
    "LocationSet",
    "OrderForm",
    "PricingFields",
    "fields_for",
    # Value Objects
    "CarType",
    "DistributionTarget",
    "HourlyPackage",
    "SendTo",
    "TripPolicy",
    "TripType",
    "policy_for",
    # Errors
    "DomainError",
    "ValidationError",
    "ReadOnlyLocationError",
    "ReorderNotAllowedError",
    "InvalidTransitionError",
    "OrderNotCancellableError",
    "FormSessionNotFoundError",
    "ApiError",
    "AuthError",
    "ServerError",
    "RequestTimeoutError",
    "NetworkError",
    "UnknownApiError",
]
