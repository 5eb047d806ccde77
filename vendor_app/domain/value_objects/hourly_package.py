"""Value Object HourlyPackage - an hours/km bundle for hourly rentals."""

from dataclasses import dataclass
from typing import Any


@dataclass(frozen=True)
class HourlyPackage:
    """
    An hourly-rental package offered by the backend.

    Attributes:
        hours: Rental duration in hours.
        km_range: Kilometres included in the package.
    """

    hours: int
    km_range: int

    def __post_init__(self) -> None:
        if self.hours <= 0:
            raise ValueError(f"hours must be positive: {self.hours}")
        if self.km_range < 0:
            raise ValueError(f"km_range cannot be negative: {self.km_range}")

    def __str__(self) -> str:
        return f"{self.hours} hrs ({self.km_range} km)"

    def to_payload(self) -> dict[str, int]:
        return {"hours": self.hours, "km_range": self.km_range}

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "HourlyPackage":
        return cls(hours=int(data["hours"]), km_range=int(data["km_range"]))


DEFAULT_PACKAGES: tuple[HourlyPackage, ...] = (HourlyPackage(hours=12, km_range=120),)


def parse_packages(body: Any) -> list[HourlyPackage] | None:
    """Parse a package list body. Returns None when the body is unusable."""
    if not isinstance(body, list) or not body:
        return None
    packages = []
    for item in body:
        if not isinstance(item, dict):
            return None
        try:
            packages.append(HourlyPackage.from_payload(item))
        except (KeyError, TypeError, ValueError):
            return None
    return packages
