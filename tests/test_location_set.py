import pytest

from vendor_app.domain.entities.location_set import LocationSet
from vendor_app.domain.errors import ReadOnlyLocationError
from vendor_app.domain.value_objects.trip_type import TRIP_POLICIES, TripType


@pytest.mark.parametrize("policy", TRIP_POLICIES, ids=lambda p: p.trip_type.name)
def test_reset_produces_default_number_of_empty_stops(policy):
    locations = LocationSet(policy.trip_type)

    assert len(locations) == policy.default_locations
    assert locations.values() == [""] * policy.default_locations


def test_reset_discards_previous_stops():
    locations = LocationSet(TripType.MULTI_CITY)
    locations.set_location(0, "Chennai")
    locations.add_stop()

    locations.reset(TripType.ONEWAY)

    assert locations.values() == ["", ""]
    assert locations.trip_type is TripType.ONEWAY


def test_set_location_out_of_range_is_a_noop():
    locations = LocationSet(TripType.ONEWAY)

    assert locations.set_location(5, "Goa") is False
    assert locations.set_location(-1, "Goa") is False
    assert locations.values() == ["", ""]


class TestRoundTripMirror:
    def test_return_slot_follows_pickup(self):
        locations = LocationSet(TripType.ROUND_TRIP)

        locations.set_location(0, "Chennai")

        assert locations.values() == ["Chennai", "", "Chennai"]

    def test_mirror_holds_after_every_pickup_edit(self):
        locations = LocationSet(TripType.ROUND_TRIP)
        for value in ("Chennai", "Madurai", ""):
            locations.set_location(0, value)
            assert locations[len(locations) - 1] == value

    def test_add_stop_keeps_mirror(self):
        locations = LocationSet(TripType.ROUND_TRIP)
        locations.set_location(0, "Chennai")
        locations.set_location(1, "Vellore")

        assert locations.add_stop() is True

        # The previous return slot stays as an ordinary stop.
        assert locations.values() == ["Chennai", "Vellore", "Chennai", "Chennai"]

    def test_return_slot_is_read_only(self):
        locations = LocationSet(TripType.ROUND_TRIP)

        with pytest.raises(ReadOnlyLocationError) as exc_info:
            locations.ensure_editable(2)

        assert "automatically set to pickup" in exc_info.value.message
        locations.ensure_editable(1)

    def test_other_trip_types_have_no_return_slot(self):
        locations = LocationSet(TripType.MULTI_CITY)
        locations.set_location(0, "Chennai")

        assert locations.values() == ["Chennai", "", ""]
        assert locations.is_return_slot(2) is False

    def test_move_then_inverse_with_pickup_involved_is_altered_by_mirror(self):
        locations = LocationSet(TripType.ROUND_TRIP)
        locations.set_location(0, "A")
        locations.set_location(1, "B")

        locations.move(0, 2)
        assert locations.values() == ["B", "A", "B"]

        locations.move(2, 0)
        assert locations.values() == ["B", "B", "B"]

    def test_move_with_blank_pickup_keeps_stop_in_return_slot(self):
        locations = LocationSet(TripType.ROUND_TRIP)
        locations.set_location(1, "B")

        locations.move(1, 2)
        assert locations.values() == ["", "", "B"]

        locations.set_location(0, "A")
        assert locations.values() == ["A", "", "A"]


class TestStopCountBounds:
    def test_add_stop_respects_max(self):
        locations = LocationSet(TripType.MULTI_CITY)
        while locations.add_stop():
            pass

        assert len(locations) == 10
        assert locations.add_stop() is False

    def test_oneway_cannot_grow(self):
        locations = LocationSet(TripType.ONEWAY)

        assert locations.add_stop() is False
        assert len(locations) == 2

    @pytest.mark.parametrize("policy", TRIP_POLICIES, ids=lambda p: p.trip_type.name)
    def test_remove_never_goes_below_min(self, policy):
        locations = LocationSet(policy.trip_type)
        locations.add_stop()

        for _ in range(12):
            locations.remove(0)

        assert len(locations) == policy.min_locations

    def test_remove_middle_stop(self):
        locations = LocationSet(TripType.MULTI_CITY)
        for position, value in enumerate(["A", "B", "C"]):
            locations.set_location(position, value)
        locations.add_stop()
        locations.set_location(3, "D")

        assert locations.remove(1) is True

        assert locations.values() == ["A", "C", "D"]


class TestMove:
    def test_move_then_inverse_restores_order(self):
        locations = LocationSet(TripType.MULTI_CITY)
        for position, value in enumerate(["A", "B", "C"]):
            locations.set_location(position, value)

        locations.move(0, 2)
        assert locations.values() == ["B", "C", "A"]

        locations.move(2, 0)
        assert locations.values() == ["A", "B", "C"]

    def test_move_out_of_range_or_same_index_is_a_noop(self):
        locations = LocationSet(TripType.MULTI_CITY)
        locations.set_location(0, "A")

        assert locations.move(0, 7) is False
        assert locations.move(1, 1) is False
        assert locations.values() == ["A", "", ""]


@pytest.mark.parametrize(
    "trip_type,labels",
    [
        (TripType.ONEWAY, ["Pickup Location", "Final Destination"]),
        (TripType.ROUND_TRIP, ["Pickup Location", "Stop 1", "Return to Pickup"]),
        (TripType.MULTI_CITY, ["Pickup Location", "Stop 1", "Final Destination"]),
        (TripType.HOURLY_RENTAL, ["Pickup Location"]),
    ],
)
def test_labels(trip_type, labels):
    assert LocationSet(trip_type).labels() == labels


def test_payload_uses_string_positions():
    locations = LocationSet(TripType.ONEWAY)
    locations.set_location(0, "Chennai")
    locations.set_location(1, "Bangalore")

    assert locations.to_payload() == {"0": "Chennai", "1": "Bangalore"}
