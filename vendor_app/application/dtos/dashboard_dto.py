"""DTOs for the driver-app dashboard."""

from dataclasses import dataclass, field
from decimal import Decimal
from typing import Any


def _decimal(value: Any) -> Decimal:
    if value is None or value == "":
        return Decimal("0")
    return Decimal(str(value))


@dataclass
class VehicleOwnerDTO:
    """DTO for the vehicle owner behind the current token."""

    id: str = ""
    full_name: str = ""
    primary_mobile: str = ""
    secondary_mobile: str | None = None
    wallet_balance: Decimal = Decimal("0")
    organization_id: str = ""
    address: str = ""
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "VehicleOwnerDTO":
        return cls(
            id=str(data.get("id") or ""),
            full_name=data.get("full_name") or "",
            primary_mobile=data.get("primary_mobile") or "",
            secondary_mobile=data.get("secondary_mobile"),
            wallet_balance=_decimal(data.get("wallet_balance")),
            organization_id=str(data.get("organization_id") or ""),
            address=data.get("address") or "",
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


@dataclass
class CarDTO:
    id: str = ""
    car_name: str = ""
    car_type: str = ""
    car_number: str = ""
    car_brand: str | None = None
    car_model: str | None = None
    car_year: int | None = None
    organization_id: str | None = None
    vehicle_owner_id: str | None = None
    car_img_url: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "CarDTO":
        return cls(
            id=str(data.get("id") or ""),
            car_name=data.get("car_name") or "",
            car_type=data.get("car_type") or "",
            car_number=data.get("car_number") or "",
            car_brand=data.get("car_brand"),
            car_model=data.get("car_model"),
            car_year=data.get("car_year"),
            organization_id=data.get("organization_id"),
            vehicle_owner_id=data.get("vehicle_owner_id"),
            car_img_url=data.get("car_img_url"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


@dataclass
class DriverDTO:
    id: str = ""
    full_name: str = ""
    primary_number: str = ""
    secondary_number: str | None = None
    address: str | None = None
    organization_id: str | None = None
    status: str | None = None
    created_at: str | None = None
    updated_at: str | None = None

    @classmethod
    def from_payload(cls, data: dict[str, Any]) -> "DriverDTO":
        return cls(
            id=str(data.get("id") or ""),
            full_name=data.get("full_name") or "",
            primary_number=data.get("primary_number") or "",
            secondary_number=data.get("secondary_number"),
            address=data.get("address"),
            organization_id=data.get("organization_id"),
            status=data.get("status"),
            created_at=data.get("created_at"),
            updated_at=data.get("updated_at"),
        )


@dataclass
class DashboardSummaryDTO:
    total_cars: int = 0
    total_drivers: int = 0
    wallet_balance: Decimal = Decimal("0")


@dataclass
class DashboardDTO:
    """Everything the dashboard renders after one load."""

    user_info: VehicleOwnerDTO
    cars: list[CarDTO] = field(default_factory=list)
    drivers: list[DriverDTO] = field(default_factory=list)
    summary: DashboardSummaryDTO = field(default_factory=DashboardSummaryDTO)
