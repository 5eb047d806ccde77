from datetime import date, datetime, time
from decimal import Decimal

import pytest

from vendor_app.application.payloads import build_confirm_payload, build_order_payload
from vendor_app.domain.entities.order_form import OrderForm
from vendor_app.domain.errors import ValidationError
from vendor_app.domain.value_objects.car_type import CarType
from vendor_app.domain.value_objects.distribution import DistributionTarget, SendTo
from vendor_app.domain.value_objects.hourly_package import HourlyPackage
from vendor_app.domain.value_objects.trip_type import TripType


@pytest.fixture
def oneway_form():
    form = OrderForm(vendor_id="vendor-1", start_date_time=datetime(2026, 3, 1, 9, 30))
    form.update(customer_name="Raj", customer_number="9999999999", cost_per_km="12")
    form.locations.set_location(0, "Chennai")
    form.locations.set_location(1, "Bangalore")
    return form


class TestValidation:
    def test_complete_form_passes(self, oneway_form):
        oneway_form.validate()

    def test_customer_name_checked_first(self):
        form = OrderForm(vendor_id="vendor-1")

        with pytest.raises(ValidationError) as exc_info:
            form.validate()

        assert exc_info.value.message == "Please enter customer name"
        assert exc_info.value.field == "customer_name"

    def test_blank_customer_number(self, oneway_form):
        oneway_form.update(customer_number="   ")

        with pytest.raises(ValidationError) as exc_info:
            oneway_form.validate()

        assert exc_info.value.message == "Please enter customer number"

    def test_missing_location_uses_its_label(self, oneway_form):
        oneway_form.locations.set_location(1, "")

        with pytest.raises(ValidationError) as exc_info:
            oneway_form.validate()

        assert exc_info.value.message == "Please enter Final Destination"
        assert exc_info.value.field == "pickup_drop_location.1"

    def test_missing_cost_per_km(self, oneway_form):
        oneway_form.update(cost_per_km="")

        with pytest.raises(ValidationError) as exc_info:
            oneway_form.validate()

        assert exc_info.value.message == "Please enter cost per km"

    def test_hourly_requires_package(self):
        form = OrderForm(vendor_id="vendor-1", trip_type=TripType.HOURLY_RENTAL)
        form.update(customer_name="Raj", customer_number="9999999999", cost_per_hour="300")
        form.locations.set_location(0, "Chennai")

        with pytest.raises(ValidationError) as exc_info:
            form.validate()

        assert exc_info.value.message == "Please select package hours"


class TestEditing:
    def test_trip_type_change_resets_stops(self, oneway_form):
        oneway_form.update(trip_type="Round Trip", customer_name="Ravi")

        assert oneway_form.trip_type is TripType.ROUND_TRIP
        assert oneway_form.locations.values() == ["", "", ""]
        assert oneway_form.customer_name == "Ravi"

    def test_date_and_time_are_set_separately(self, oneway_form):
        oneway_form.update(start_date=date(2026, 4, 2))
        oneway_form.update(start_time=time(18, 45))

        assert oneway_form.start_date_time == datetime(2026, 4, 2, 18, 45)

    def test_max_time_in_minutes(self, oneway_form):
        oneway_form.update(max_time_hours="1", max_time_minutes=30)

        assert oneway_form.max_time_to_assign_order == 90

    def test_minutes_above_59_rejected(self, oneway_form):
        with pytest.raises(ValidationError):
            oneway_form.update(max_time_minutes=75)

    def test_unknown_car_type_rejected(self, oneway_form):
        with pytest.raises(ValidationError):
            oneway_form.update(car_type="Rickshaw")

    def test_rejected_batch_leaves_form_untouched(self, oneway_form):
        with pytest.raises(ValidationError):
            oneway_form.update(
                trip_type=TripType.ROUND_TRIP,
                customer_name="Anita",
                start_time=time(18, 0),
                max_time_minutes=99,
            )

        assert oneway_form.trip_type is TripType.ONEWAY
        assert oneway_form.locations.values() == ["Chennai", "Bangalore"]
        assert oneway_form.customer_name == "Raj"
        assert oneway_form.start_date_time == datetime(2026, 3, 1, 9, 30)

    def test_rejected_pricing_value_keeps_earlier_fields(self, oneway_form):
        with pytest.raises(ValidationError):
            oneway_form.update(cost_per_km="15", driver_allowance="-1")

        assert oneway_form.distance.cost_per_km == Decimal("12")

    def test_package_from_payload(self):
        form = OrderForm(vendor_id="vendor-1", trip_type=TripType.HOURLY_RENTAL)

        form.update(package={"hours": 4, "km_range": 40})

        assert form.hourly.package == HourlyPackage(hours=4, km_range=40)


class TestPayload:
    def test_oneway_payload(self, oneway_form):
        request = build_order_payload(oneway_form)
        payload = request.payload

        assert request.hourly is False
        assert payload["trip_type"] == "Oneway"
        assert payload["pickup_drop_location"] == {"0": "Chennai", "1": "Bangalore"}
        assert payload["cost_per_km"] == 12
        assert payload["customer_name"] == "Raj"
        assert payload["car_type"] == CarType.HATCHBACK.value
        assert payload["max_time_to_assign_order"] == 10
        assert payload["start_date_time"] == "2026-03-01T09:30:00"
        for name in ("cost_per_hour", "package_hours", "extra_cost_per_hour", "cost_for_addon_km"):
            assert name not in payload

    def test_blank_optional_fields_sent_as_zero(self, oneway_form):
        payload = build_order_payload(oneway_form).payload

        assert payload["driver_allowance"] == 0
        assert payload["night_charges"] == 0
        assert "toll_charges" not in payload

    def test_fractional_amount_kept(self, oneway_form):
        oneway_form.update(driver_allowance="250.50")

        assert build_order_payload(oneway_form).payload["driver_allowance"] == 250.5

    def test_hourly_payload(self):
        form = OrderForm(vendor_id="vendor-1", trip_type=TripType.HOURLY_RENTAL)
        form.update(
            customer_name="Raj",
            customer_number="9999999999",
            package={"hours": 4, "km_range": 40},
            cost_per_hour="300",
        )
        form.locations.set_location(0, "Chennai")

        request = build_order_payload(form)
        payload = request.payload

        assert request.hourly is True
        assert payload["trip_type"] == "Hourly Rental"
        assert payload["package_hours"] == {"hours": 4, "km_range": 40}
        assert payload["cost_per_hour"] == 300
        for name in ("cost_per_km", "driver_allowance", "toll_charges", "night_charges"):
            assert name not in payload

    def test_confirm_payload_carries_distribution(self, oneway_form):
        target = DistributionTarget(send_to=SendTo.NEAR_CITY, near_city=("Chennai", " Vellore "))

        payload = build_confirm_payload(oneway_form, target).payload

        assert payload["send_to"] == "NEAR_CITY"
        assert payload["near_city"] == ["Chennai", "Vellore"]
        assert payload["cost_per_km"] == 12

    def test_near_city_without_cities_rejected(self):
        with pytest.raises(ValueError):
            DistributionTarget(send_to="near_city")

    def test_everyone_sends_empty_city_list(self, oneway_form):
        payload = build_confirm_payload(oneway_form, DistributionTarget.everyone()).payload

        assert payload["send_to"] == "ALL"
        assert payload["near_city"] == []


def test_amounts_are_decimal(oneway_form):
    assert oneway_form.distance.cost_per_km == Decimal("12")
