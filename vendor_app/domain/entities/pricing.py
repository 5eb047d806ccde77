"""Pricing field sets: distance-based and hourly-rental-based."""

from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Any

from vendor_app.domain.errors import ValidationError
from vendor_app.domain.value_objects.hourly_package import HourlyPackage
from vendor_app.domain.value_objects.trip_type import TripType, policy_for

DISTANCE_FIELDS = (
    "cost_per_km",
    "extra_cost_per_km",
    "driver_allowance",
    "extra_driver_allowance",
    "permit_charges",
    "extra_permit_charges",
    "hill_charges",
    "toll_charges",
    "night_charges",
)

HOURLY_FIELDS = (
    "package",
    "cost_per_hour",
    "extra_cost_per_hour",
    "cost_for_addon_km",
    "extra_cost_for_addon_km",
)

_PROMPTS = {
    "package": "Please select package hours",
}


def prompt_for(field_name: str) -> str:
    """User-facing message for a missing pricing field."""
    if field_name in _PROMPTS:
        return _PROMPTS[field_name]
    return f"Please enter {field_name.replace('_', ' ')}"


def parse_amount(field_name: str, value: Any) -> Decimal | None:
    """Blank input means "not given"; anything else must be a non-negative number."""
    if value is None:
        return None
    if isinstance(value, str):
        value = value.strip()
        if not value:
            return None
    try:
        amount = Decimal(str(value))
    except InvalidOperation:
        raise ValidationError(field_name, f"Please enter a valid {field_name.replace('_', ' ')}")
    if not amount.is_finite() or amount < 0:
        raise ValidationError(field_name, f"Please enter a valid {field_name.replace('_', ' ')}")
    return amount


@dataclass(frozen=True)
class PricingFields:
    required: tuple[str, ...]
    optional: tuple[str, ...]

    @property
    def all(self) -> tuple[str, ...]:
        return self.required + self.optional


def fields_for(trip_type: TripType | str, toll_charge_update: bool = True) -> PricingFields:
    """
    Which pricing fields the form solicits for a trip type.

    Hourly rentals need a package and an hourly cost. Every other trip type
    needs a per-km cost; toll charges are only asked for when tolls are not
    already included in the quote (toll_charge_update is False).
    """
    if policy_for(trip_type).is_hourly:
        return PricingFields(required=HOURLY_FIELDS[:2], optional=HOURLY_FIELDS[2:])

    optional = tuple(
        name
        for name in DISTANCE_FIELDS[1:]
        if name != "toll_charges" or not toll_charge_update
    )
    return PricingFields(required=DISTANCE_FIELDS[:1], optional=optional)


@dataclass
class DistanceProfile:
    cost_per_km: Decimal | None = None
    extra_cost_per_km: Decimal | None = None
    driver_allowance: Decimal | None = None
    extra_driver_allowance: Decimal | None = None
    permit_charges: Decimal | None = None
    extra_permit_charges: Decimal | None = None
    hill_charges: Decimal | None = None
    toll_charges: Decimal | None = None
    night_charges: Decimal | None = None


@dataclass
class HourlyProfile:
    package: HourlyPackage | None = None
    cost_per_hour: Decimal | None = None
    extra_cost_per_hour: Decimal | None = None
    cost_for_addon_km: Decimal | None = None
    extra_cost_for_addon_km: Decimal | None = None

