"""Value Objects of the order console domain."""

from vendor_app.domain.value_objects.car_type import CarType
from vendor_app.domain.value_objects.distribution import DistributionTarget, SendTo
from vendor_app.domain.value_objects.hourly_package import (
    DEFAULT_PACKAGES,
    HourlyPackage,
    parse_packages,
)
from vendor_app.domain.value_objects.trip_type import (
    TRIP_POLICIES,
    PricingMode,
    TripPolicy,
    TripType,
    parse_trip_type,
    policy_for,
)

__all__ = [
    "CarType",
    "DistributionTarget",
    "SendTo",
    "DEFAULT_PACKAGES",
    "HourlyPackage",
    "parse_packages",
    "TRIP_POLICIES",
    "PricingMode",
    "TripPolicy",
    "TripType",
    "parse_trip_type",
    "policy_for",
]
