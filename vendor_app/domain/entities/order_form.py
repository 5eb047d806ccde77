"""Entity OrderForm - the state of one order-creation session."""

from dataclasses import dataclass, field
from datetime import date, datetime, time
from typing import Any

from vendor_app.domain.entities.location_set import LocationSet
from vendor_app.domain.entities.pricing import (
    DISTANCE_FIELDS,
    HOURLY_FIELDS,
    DistanceProfile,
    HourlyProfile,
    fields_for,
    parse_amount,
    prompt_for,
)
from vendor_app.domain.errors import ValidationError
from vendor_app.domain.value_objects.car_type import CarType
from vendor_app.domain.value_objects.hourly_package import HourlyPackage
from vendor_app.domain.value_objects.trip_type import (
    TripPolicy,
    TripType,
    parse_trip_type,
    policy_for,
)

EDITABLE_FIELDS = (
    "car_type",
    "customer_name",
    "customer_number",
    "max_time_hours",
    "max_time_minutes",
    "toll_charge_update",
    "pickup_notes",
)


@dataclass
class OrderForm:
    """
    Everything the vendor has typed into the order-creation screen.

    Attributes:
        vendor_id: Identity of the vendor placing the order.
        trip_type: Governs stop count and which pricing fields apply.
        locations: Ordered stops for the trip.
        start_date_time: Combined date and time of pickup.
        max_time_hours / max_time_minutes: How long the backend may take to
            assign the order.
        toll_charge_update: True when tolls are bundled into the quote.
        distance / hourly: Both pricing profiles; only the one matching the
            trip type is submitted.
    """

    vendor_id: str
    trip_type: TripType = TripType.ONEWAY
    car_type: CarType = CarType.HATCHBACK
    locations: LocationSet = field(default_factory=LocationSet)
    start_date_time: datetime = field(
        default_factory=lambda: datetime.now().replace(second=0, microsecond=0)
    )
    customer_name: str = ""
    customer_number: str = ""
    max_time_hours: int = 0
    max_time_minutes: int = 10
    toll_charge_update: bool = True
    pickup_notes: str = ""
    distance: DistanceProfile = field(default_factory=DistanceProfile)
    hourly: HourlyProfile = field(default_factory=HourlyProfile)

    def __post_init__(self) -> None:
        self.trip_type = parse_trip_type(self.trip_type)
        if self.locations.trip_type is not self.trip_type:
            self.locations.reset(self.trip_type)

    @property
    def policy(self) -> TripPolicy:
        return policy_for(self.trip_type)

    @property
    def max_time_to_assign_order(self) -> int:
        """Assignment window in minutes."""
        return self.max_time_hours * 60 + self.max_time_minutes

    def change_trip_type(self, trip_type: TripType | str) -> None:
        """Switch trip type; stops are reset to the new type's default shape."""
        self.trip_type = parse_trip_type(trip_type)
        self.locations.reset(self.trip_type)

    def set_start_date(self, value: date) -> None:
        self.start_date_time = self.start_date_time.replace(
            year=value.year, month=value.month, day=value.day
        )

    def set_start_time(self, value: time) -> None:
        self.start_date_time = self.start_date_time.replace(
            hour=value.hour, minute=value.minute, second=0, microsecond=0
        )

    def set_pricing(self, field_name: str, value: Any) -> None:
        target, coerced = self._pricing_target(field_name, value)
        setattr(target, field_name, coerced)

    def _pricing_target(self, field_name: str, value: Any) -> tuple[Any, Any]:
        if field_name == "package":
            return self.hourly, _coerce_package(value)
        if field_name in HOURLY_FIELDS:
            return self.hourly, parse_amount(field_name, value)
        if field_name in DISTANCE_FIELDS:
            return self.distance, parse_amount(field_name, value)
        raise ValidationError(field_name, f"Unknown pricing field: {field_name}")

    def update(self, **changes: Any) -> None:
        """
        Apply a batch of edits, all or nothing.

        Every value is coerced first; a ValidationError leaves the form
        untouched. A trip type change is applied before the other fields.
        """
        trip_type = parse_trip_type(changes.pop("trip_type")) if "trip_type" in changes else None
        start = self.start_date_time
        assignments: list[tuple[Any, str, Any]] = []
        for name, value in changes.items():
            if name in EDITABLE_FIELDS:
                assignments.append((self, name, _coerce_field(name, value)))
            elif name == "start_date":
                start = start.replace(year=value.year, month=value.month, day=value.day)
            elif name == "start_time":
                start = start.replace(hour=value.hour, minute=value.minute, second=0, microsecond=0)
            elif name == "start_date_time":
                start = value
            else:
                target, coerced = self._pricing_target(name, value)
                assignments.append((target, name, coerced))

        if trip_type is not None:
            self.change_trip_type(trip_type)
        self.start_date_time = start
        for target, name, value in assignments:
            setattr(target, name, value)

    def validate(self) -> None:
        """
        Check the form in display order, raising on the first problem.

        Order: customer name, customer number, every stop, then the pricing
        fields the trip type requires.
        """
        if not self.customer_name.strip():
            raise ValidationError("customer_name", "Please enter customer name")
        if not self.customer_number.strip():
            raise ValidationError("customer_number", "Please enter customer number")

        for position, value in enumerate(self.locations):
            if not value.strip():
                label = self.locations.label_for(position)
                raise ValidationError(f"pickup_drop_location.{position}", f"Please enter {label}")

        profile = self.hourly if self.policy.is_hourly else self.distance
        for name in fields_for(self.trip_type, self.toll_charge_update).required:
            if getattr(profile, name) is None:
                raise ValidationError(name, prompt_for(name))

    def pricing_values(self) -> dict[str, Any]:
        """Values of the pricing fields that apply to the current trip type."""
        profile = self.hourly if self.policy.is_hourly else self.distance
        solicited = fields_for(self.trip_type, self.toll_charge_update).all
        return {name: getattr(profile, name) for name in solicited}


def _coerce_package(value: Any) -> HourlyPackage | None:
    if value is None or isinstance(value, HourlyPackage):
        return value
    try:
        return HourlyPackage.from_payload(value)
    except (KeyError, TypeError, ValueError):
        raise ValidationError("package", "Please select package hours")


def _coerce_field(name: str, value: Any) -> Any:
    if name == "car_type":
        try:
            return CarType(value)
        except ValueError:
            raise ValidationError("car_type", f"Unknown car type: {value}")
    if name in ("max_time_hours", "max_time_minutes"):
        try:
            number = int(value)
        except (TypeError, ValueError):
            raise ValidationError(name, "Please enter a valid max time to assign order")
        if number < 0 or (name == "max_time_minutes" and number > 59):
            raise ValidationError(name, "Please enter a valid max time to assign order")
        return number
    if name == "toll_charge_update":
        return bool(value)
    return "" if value is None else str(value)
