"""Value Object DistributionTarget - who can see a newly created order."""

from dataclasses import dataclass, field
from enum import Enum


class SendTo(str, Enum):
    ALL = "ALL"
    NEAR_CITY = "NEAR_CITY"


@dataclass(frozen=True)
class DistributionTarget:
    """
    Distribution of an order among vehicle owners.

    Attributes:
        send_to: ALL owners, or only those near the given cities.
        near_city: City filters; required when send_to is NEAR_CITY.
    """

    send_to: SendTo = SendTo.ALL
    near_city: tuple[str, ...] = field(default_factory=tuple)

    def __post_init__(self) -> None:
        if not isinstance(self.send_to, SendTo):
            object.__setattr__(self, "send_to", SendTo(str(self.send_to).upper()))
        cities = tuple(c.strip() for c in self.near_city if c and c.strip())
        object.__setattr__(self, "near_city", cities)
        if self.send_to is SendTo.NEAR_CITY and not self.near_city:
            raise ValueError("near_city requires at least one city when send_to is NEAR_CITY")

    def to_payload(self) -> dict[str, object]:
        return {"send_to": self.send_to.value, "near_city": list(self.near_city)}

    @classmethod
    def everyone(cls) -> "DistributionTarget":
        return cls()
