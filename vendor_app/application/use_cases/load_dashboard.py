import logging

from vendor_app.application.dtos.dashboard_dto import (
    CarDTO,
    DashboardDTO,
    DashboardSummaryDTO,
    DriverDTO,
    VehicleOwnerDTO,
)
from vendor_app.application.fallback import endpoint_fetchers, fetch_first_available
from vendor_app.application.interfaces.vendor_backend import VendorBackend
from vendor_app.domain.errors import ApiError, UnknownApiError


def car_endpoints(owner: VehicleOwnerDTO) -> list[str]:
    return [
        f"/api/users/cardetails/organization/{owner.organization_id}",
        "/api/assignments/available-cars",
        f"/api/users/vehicle-owner/{owner.id}/cars",
    ]


def driver_endpoints(owner: VehicleOwnerDTO) -> list[str]:
    return [
        f"/api/users/cardriver/organization/{owner.organization_id}",
        "/api/assignments/available-drivers",
        f"/api/users/vehicle-owner/{owner.id}/drivers",
    ]


class LoadDashboardUseCase:
    """
    Loads the vehicle-owner dashboard.

    The owner identity fetch is mandatory and not retried: its failure fails
    the whole load with the classified ApiError before any car or driver
    request is made. Cars and drivers each go through their own ordered
    list of candidate endpoints and degrade to an empty list.
    """

    def __init__(self, backend: VendorBackend) -> None:
        self._backend = backend
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> DashboardDTO:
        try:
            owner_payload = await self._backend.get_vehicle_owner_me()
        except ApiError as exc:
            self._logger.error(
                "Failed to fetch dashboard data",
                extra={"error_code": exc.code, "http_status": exc.status_code},
            )
            raise

        if not owner_payload or not isinstance(owner_payload, dict):
            raise UnknownApiError("Failed to fetch vehicle owner details")
        owner = VehicleOwnerDTO.from_payload(owner_payload)

        car_rows = await fetch_first_available(
            endpoint_fetchers(self._backend, car_endpoints(owner)), resource="cars"
        )
        driver_rows = await fetch_first_available(
            endpoint_fetchers(self._backend, driver_endpoints(owner)), resource="drivers"
        )

        cars = [CarDTO.from_payload(row) for row in car_rows if isinstance(row, dict)]
        drivers = [DriverDTO.from_payload(row) for row in driver_rows if isinstance(row, dict)]

        self._logger.info(
            "Dashboard data assembled",
            extra={"car_count": len(cars), "driver_count": len(drivers)},
        )
        return DashboardDTO(
            user_info=owner,
            cars=cars,
            drivers=drivers,
            summary=DashboardSummaryDTO(
                total_cars=len(cars),
                total_drivers=len(drivers),
                wallet_balance=owner.wallet_balance,
            ),
        )
