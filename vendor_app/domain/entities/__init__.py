"""Entities of the order console domain."""

from vendor_app.domain.entities.location_set import LocationSet
from vendor_app.domain.entities.order_form import OrderForm
from vendor_app.domain.entities.pricing import (
    DISTANCE_FIELDS,
    HOURLY_FIELDS,
    DistanceProfile,
    HourlyProfile,
    PricingFields,
    fields_for,
)

__all__ = [
    "LocationSet",
    "OrderForm",
    "DISTANCE_FIELDS",
    "HOURLY_FIELDS",
    "DistanceProfile",
    "HourlyProfile",
    "PricingFields",
    "fields_for",
]
