"""Trip types and the policy table every trip-type rule is read from."""

import logging
from dataclasses import dataclass
from enum import Enum

logger = logging.getLogger(__name__)


class TripType(str, Enum):
    """Trip types as the backend spells them on the wire."""

    ONEWAY = "Oneway"
    ROUND_TRIP = "Round Trip"
    MULTI_CITY = "Multy City"
    HOURLY_RENTAL = "Hourly Rental"

    @property
    def label(self) -> str:
        return _LABELS[self]


class PricingMode(str, Enum):
    DISTANCE = "DISTANCE"
    HOURLY = "HOURLY"


_LABELS = {
    TripType.ONEWAY: "One Way",
    TripType.ROUND_TRIP: "Round Trip",
    TripType.MULTI_CITY: "Multi City",
    TripType.HOURLY_RENTAL: "Hourly Rental",
}

# Aliases accepted from stale clients or server-driven configuration.
_ALIASES = {
    "oneway": TripType.ONEWAY,
    "one way": TripType.ONEWAY,
    "roundtrip": TripType.ROUND_TRIP,
    "round trip": TripType.ROUND_TRIP,
    "round_trip": TripType.ROUND_TRIP,
    "multicity": TripType.MULTI_CITY,
    "multi city": TripType.MULTI_CITY,
    "multy city": TripType.MULTI_CITY,
    "multi_city": TripType.MULTI_CITY,
    "hourlyrental": TripType.HOURLY_RENTAL,
    "hourly rental": TripType.HOURLY_RENTAL,
    "hourly_rental": TripType.HOURLY_RENTAL,
}


@dataclass(frozen=True)
class TripPolicy:
    """
    Rules attached to a trip type.

    Attributes:
        trip_type: The trip type these rules belong to.
        min_locations: Smallest allowed number of stops (inclusive).
        max_locations: Largest allowed number of stops (inclusive).
        default_locations: Number of empty stops after a reset.
        pricing_mode: Which pricing field set the form solicits.
        reorderable: Whether the caller may reorder stops.
    """

    trip_type: TripType
    min_locations: int
    max_locations: int
    default_locations: int
    pricing_mode: PricingMode
    reorderable: bool

    @property
    def is_hourly(self) -> bool:
        return self.pricing_mode is PricingMode.HOURLY


TRIP_POLICIES: tuple[TripPolicy, ...] = (
    TripPolicy(TripType.ONEWAY, 2, 2, 2, PricingMode.DISTANCE, False),
    TripPolicy(TripType.ROUND_TRIP, 3, 10, 3, PricingMode.DISTANCE, True),
    TripPolicy(TripType.MULTI_CITY, 3, 10, 3, PricingMode.DISTANCE, True),
    TripPolicy(TripType.HOURLY_RENTAL, 1, 1, 1, PricingMode.HOURLY, False),
)

_BY_TYPE = {policy.trip_type: policy for policy in TRIP_POLICIES}


def parse_trip_type(value: "TripType | str | None") -> TripType:
    """Resolve a wire value or alias; unknown values fall back to the first trip type."""
    if isinstance(value, TripType):
        return value
    if value is not None:
        raw = str(value).strip()
        try:
            return TripType(raw)
        except ValueError:
            pass
        if raw.upper() in TripType.__members__:
            return TripType[raw.upper()]
        alias = _ALIASES.get(raw.lower())
        if alias is not None:
            return alias

    fallback = TRIP_POLICIES[0].trip_type
    logger.warning(
        "Unknown trip type, falling back",
        extra={"trip_type": value, "fallback": fallback.value},
    )
    return fallback


def policy_for(trip_type: "TripType | str | None") -> TripPolicy:
    return _BY_TYPE[parse_trip_type(trip_type)]
