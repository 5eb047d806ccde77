"""Request shaping for the quote and confirm calls."""

from decimal import Decimal
from typing import Any

from vendor_app.application.interfaces.vendor_backend import QuoteRequest
from vendor_app.domain.entities.order_form import OrderForm
from vendor_app.domain.value_objects.distribution import DistributionTarget
from vendor_app.domain.value_objects.hourly_package import HourlyPackage


def _number(value: Decimal | None) -> int | float:
    if value is None:
        return 0
    if value == value.to_integral_value():
        return int(value)
    return float(value)


def build_order_payload(form: OrderForm) -> QuoteRequest:
    """
    Payload shared by the quote and confirm calls.

    Only the pricing fields of the active trip type are included; optional
    fields left blank are sent as 0.
    """
    payload: dict[str, Any] = {
        "vendor_id": form.vendor_id,
        "trip_type": form.trip_type.value,
        "car_type": form.car_type.value,
        "pickup_drop_location": form.locations.to_payload(),
        "start_date_time": form.start_date_time.isoformat(),
        "customer_name": form.customer_name.strip(),
        "customer_number": form.customer_number.strip(),
        "max_time_to_assign_order": form.max_time_to_assign_order,
        "toll_charge_update": form.toll_charge_update,
        "pickup_notes": form.pickup_notes,
    }

    for name, value in form.pricing_values().items():
        if isinstance(value, HourlyPackage):
            payload["package_hours"] = value.to_payload()
        elif name == "package":
            payload["package_hours"] = None
        else:
            payload[name] = _number(value)

    return QuoteRequest(hourly=form.policy.is_hourly, payload=payload)


def build_confirm_payload(form: OrderForm, target: DistributionTarget) -> QuoteRequest:
    request = build_order_payload(form)
    request.payload.update(target.to_payload())
    return request
