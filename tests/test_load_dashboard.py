from decimal import Decimal

import pytest

from vendor_app.application.interfaces.vendor_backend import EndpointResult
from vendor_app.application.use_cases.load_dashboard import (
    LoadDashboardUseCase,
    car_endpoints,
    driver_endpoints,
)
from vendor_app.domain.errors import AuthError, ServerError, UnknownApiError

OWNER = {
    "id": "owner-9",
    "full_name": "Ravi",
    "primary_mobile": "9000000000",
    "wallet_balance": "250.75",
    "organization_id": "org-9",
    "address": "Madurai",
}


def _routes(mock_backend, responses: dict):
    async def try_get_list(path):
        return responses.get(path, EndpointResult(path=path, error=ServerError(status_code=404)))

    mock_backend.try_get_list.side_effect = try_get_list


async def test_owner_401_fails_without_fetching_cars_or_drivers(mock_backend):
    mock_backend.get_vehicle_owner_me.side_effect = AuthError()

    with pytest.raises(AuthError) as exc_info:
        await LoadDashboardUseCase(mock_backend).execute()

    assert exc_info.value.message == "Authentication failed. Please login again."
    mock_backend.try_get_list.assert_not_called()


async def test_dashboard_uses_first_working_endpoint(mock_backend):
    mock_backend.get_vehicle_owner_me.return_value = OWNER
    _routes(
        mock_backend,
        {
            "/api/users/cardetails/organization/org-9": EndpointResult(
                path="", body={"detail": "not a list"}
            ),
            "/api/assignments/available-cars": EndpointResult(
                path="", body=[{"id": "car-1", "car_name": "Innova", "car_type": "INNOVA"}]
            ),
            "/api/users/cardriver/organization/org-9": EndpointResult(
                path="", body=[{"id": "d-1", "full_name": "Kumar"}, {"id": "d-2", "full_name": "Mani"}]
            ),
        },
    )

    dashboard = await LoadDashboardUseCase(mock_backend).execute()

    assert dashboard.user_info.full_name == "Ravi"
    assert [car.car_name for car in dashboard.cars] == ["Innova"]
    assert [driver.id for driver in dashboard.drivers] == ["d-1", "d-2"]
    assert dashboard.summary.total_cars == 1
    assert dashboard.summary.total_drivers == 2
    assert dashboard.summary.wallet_balance == Decimal("250.75")

    called = [call.args[0] for call in mock_backend.try_get_list.await_args_list]
    assert "/api/users/vehicle-owner/owner-9/cars" not in called
    assert "/api/assignments/available-drivers" not in called


async def test_no_working_endpoints_gives_empty_lists(mock_backend):
    mock_backend.get_vehicle_owner_me.return_value = OWNER
    _routes(mock_backend, {})

    dashboard = await LoadDashboardUseCase(mock_backend).execute()

    assert dashboard.cars == []
    assert dashboard.drivers == []
    assert mock_backend.try_get_list.await_count == 6


async def test_non_dict_owner_body_is_rejected(mock_backend):
    mock_backend.get_vehicle_owner_me.return_value = []

    with pytest.raises(UnknownApiError) as exc_info:
        await LoadDashboardUseCase(mock_backend).execute()

    assert exc_info.value.message == "Failed to fetch vehicle owner details"


def test_candidate_endpoint_order():
    from vendor_app.application.dtos.dashboard_dto import VehicleOwnerDTO

    owner = VehicleOwnerDTO.from_payload(OWNER)

    assert car_endpoints(owner) == [
        "/api/users/cardetails/organization/org-9",
        "/api/assignments/available-cars",
        "/api/users/vehicle-owner/owner-9/cars",
    ]
    assert driver_endpoints(owner)[0] == "/api/users/cardriver/organization/org-9"
