"""Entity LocationSet - the ordered stops of a trip."""

from collections.abc import Iterator

from vendor_app.domain.errors import ReadOnlyLocationError
from vendor_app.domain.value_objects.trip_type import (
    TripPolicy,
    TripType,
    parse_trip_type,
    policy_for,
)


class LocationSet:
    """
    Ordered stops of a trip, keyed by contiguous 0-based positions.

    The trip type decides how many stops are allowed. For round trips the
    last stop is always a copy of the pickup (position 0) and cannot be
    edited directly.

    Out-of-range operations are silent no-ops; each mutator returns whether
    it changed anything.
    """

    def __init__(self, trip_type: TripType | str = TripType.ONEWAY) -> None:
        self._trip_type = parse_trip_type(trip_type)
        self._slots: list[str] = []
        self.reset(self._trip_type)

    @property
    def trip_type(self) -> TripType:
        return self._trip_type

    @property
    def policy(self) -> TripPolicy:
        return policy_for(self._trip_type)

    def __len__(self) -> int:
        return len(self._slots)

    def __iter__(self) -> Iterator[str]:
        return iter(self._slots)

    def __getitem__(self, position: int) -> str:
        return self._slots[position]

    def __repr__(self) -> str:
        return f"LocationSet({self._trip_type.value!r}, {self._slots!r})"

    def values(self) -> list[str]:
        return list(self._slots)

    def reset(self, trip_type: TripType | str) -> None:
        """Replace all stops with the trip type's default shape (all empty)."""
        self._trip_type = parse_trip_type(trip_type)
        self._slots = [""] * self.policy.default_locations

    def set_location(self, position: int, value: str) -> bool:
        if not self._in_bounds(position):
            return False
        self._slots[position] = value
        if position == 0:
            self._mirror_return(force=True)
        return True

    def add_stop(self) -> bool:
        if len(self._slots) >= self.policy.max_locations:
            return False
        self._slots.append("")
        self._mirror_return()
        return True

    def move(self, from_index: int, to_index: int) -> bool:
        """
        Move a stop to another position, shifting the ones in between.

        For round trips the mirror rule runs on the new arrangement, so a
        move followed by its inverse does not always restore the original
        order when position 0 or the last position took part in it.

        A blank pickup is not mirrored, so moving a stop into the last
        position while the pickup is empty leaves that stop in the return
        slot until the pickup is set.
        """
        if from_index == to_index:
            return False
        if not (self._in_bounds(from_index) and self._in_bounds(to_index)):
            return False
        moved = self._slots.pop(from_index)
        self._slots.insert(to_index, moved)
        self._mirror_return()
        return True

    def remove(self, position: int) -> bool:
        if not self._in_bounds(position):
            return False
        if len(self._slots) - 1 < self.policy.min_locations:
            return False
        del self._slots[position]
        self._mirror_return()
        return True

    def is_return_slot(self, position: int) -> bool:
        return (
            self._trip_type is TripType.ROUND_TRIP
            and len(self._slots) > 1
            and position == len(self._slots) - 1
        )

    def ensure_editable(self, position: int) -> None:
        """Reject edits to the derived round-trip return slot."""
        if self.is_return_slot(position):
            raise ReadOnlyLocationError(position)

    def label_for(self, position: int) -> str:
        last = len(self._slots) - 1
        if self._trip_type is TripType.HOURLY_RENTAL or position == 0:
            return "Pickup Location"
        if self._trip_type is TripType.ROUND_TRIP and position == last:
            return "Return to Pickup"
        if position == last:
            return "Final Destination"
        return f"Stop {position}"

    def labels(self) -> list[str]:
        return [self.label_for(position) for position in range(len(self._slots))]

    def to_payload(self) -> dict[str, str]:
        return {str(position): value for position, value in enumerate(self._slots)}

    def _in_bounds(self, position: int) -> bool:
        return 0 <= position < len(self._slots)

    def _mirror_return(self, force: bool = False) -> None:
        if self._trip_type is not TripType.ROUND_TRIP or len(self._slots) < 2:
            return
        # A blank pickup is only copied when it was set explicitly.
        if force or self._slots[0]:
            self._slots[-1] = self._slots[0]
