from datetime import date, datetime, time
from decimal import Decimal
from typing import Any

from pydantic import BaseModel, ConfigDict, Field

from vendor_app.application.use_cases.compose_order import OrderComposer, OrderWorkflowState
from vendor_app.domain.entities.pricing import fields_for
from vendor_app.domain.value_objects.car_type import CarType
from vendor_app.domain.value_objects.distribution import SendTo
from vendor_app.domain.value_objects.hourly_package import HourlyPackage

Amount = Decimal | str | None


class HourlyPackageSchema(BaseModel):
    model_config = ConfigDict(extra="forbid")

    hours: int = Field(gt=0)
    km_range: int = Field(ge=0)


class UpdateOrderFormRequest(BaseModel):
    """Partial edit of the form. Only the fields sent are applied."""

    model_config = ConfigDict(extra="forbid")

    trip_type: str | None = None
    car_type: CarType | None = None
    customer_name: str | None = None
    customer_number: str | None = None
    start_date: date | None = None
    start_time: time | None = None
    start_date_time: datetime | None = None
    max_time_hours: int | None = None
    max_time_minutes: int | None = None
    toll_charge_update: bool | None = None
    pickup_notes: str | None = None

    # Distance pricing
    cost_per_km: Amount = None
    extra_cost_per_km: Amount = None
    driver_allowance: Amount = None
    extra_driver_allowance: Amount = None
    permit_charges: Amount = None
    extra_permit_charges: Amount = None
    hill_charges: Amount = None
    toll_charges: Amount = None
    night_charges: Amount = None

    # Hourly pricing
    package: HourlyPackageSchema | None = None
    cost_per_hour: Amount = None
    extra_cost_per_hour: Amount = None
    cost_for_addon_km: Amount = None
    extra_cost_for_addon_km: Amount = None


class SetLocationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    value: str


class MoveLocationRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    from_index: int = Field(ge=0)
    to_index: int = Field(ge=0)


class ConfirmOrderRequest(BaseModel):
    model_config = ConfigDict(extra="forbid")

    send_to: SendTo = SendTo.ALL
    near_city: list[str] = Field(default_factory=list)


class LocationView(BaseModel):
    position: int
    label: str
    value: str
    read_only: bool


class OrderFormView(BaseModel):
    trip_type: str
    car_type: CarType
    locations: list[LocationView]
    can_add_stop: bool
    can_remove_stop: bool
    can_reorder: bool
    start_date_time: datetime
    customer_name: str
    customer_number: str
    max_time_hours: int
    max_time_minutes: int
    max_time_to_assign_order: int
    toll_charge_update: bool
    pickup_notes: str
    required_fields: list[str]
    optional_fields: list[str]
    pricing: dict[str, Any]


class OrderFormSessionResponse(BaseModel):
    session_id: str
    state: OrderWorkflowState
    is_loading: bool
    error_message: str | None = None
    error_field: str | None = None
    packages: list[HourlyPackageSchema]
    quote: dict[str, Any] | None = None
    order: dict[str, Any] | None = None
    form: OrderFormView

    @classmethod
    def from_composer(cls, session_id: str, composer: OrderComposer) -> "OrderFormSessionResponse":
        form = composer.form
        locations = form.locations
        policy = form.policy
        solicited = fields_for(form.trip_type, form.toll_charge_update)
        pricing = {
            name: value.to_payload() if isinstance(value, HourlyPackage) else value
            for name, value in form.pricing_values().items()
        }
        return cls(
            session_id=session_id,
            state=composer.state,
            is_loading=composer.is_loading,
            error_message=composer.error_message,
            error_field=composer.error_field,
            packages=[HourlyPackageSchema(**p.to_payload()) for p in composer.packages],
            quote=composer.quote,
            order=composer.order,
            form=OrderFormView(
                trip_type=form.trip_type.value,
                car_type=form.car_type,
                locations=[
                    LocationView(
                        position=position,
                        label=locations.label_for(position),
                        value=value,
                        read_only=locations.is_return_slot(position),
                    )
                    for position, value in enumerate(locations)
                ],
                can_add_stop=len(locations) < policy.max_locations,
                can_remove_stop=len(locations) > policy.min_locations,
                can_reorder=policy.reorderable,
                start_date_time=form.start_date_time,
                customer_name=form.customer_name,
                customer_number=form.customer_number,
                max_time_hours=form.max_time_hours,
                max_time_minutes=form.max_time_minutes,
                max_time_to_assign_order=form.max_time_to_assign_order,
                toll_charge_update=form.toll_charge_update,
                pickup_notes=form.pickup_notes,
                required_fields=list(solicited.required),
                optional_fields=list(solicited.optional),
                pricing=pricing,
            ),
        )
