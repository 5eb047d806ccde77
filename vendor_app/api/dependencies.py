from functools import lru_cache

from fastapi import Depends

from vendor_app.application.interfaces.auth import StaticTokenAuth
from vendor_app.application.interfaces.vendor_backend import VendorBackend
from vendor_app.application.use_cases.compose_order import OrderComposer
from vendor_app.application.use_cases.list_pending_orders import ListPendingOrdersUseCase
from vendor_app.application.use_cases.load_dashboard import LoadDashboardUseCase
from vendor_app.application.use_cases.manage_order import ManageOrderUseCase
from vendor_app.application.use_cases.vendor_orders import (
    LoadVendorHomeUseCase,
    VendorOrdersUseCase,
)
from vendor_app.config import Settings, get_settings
from vendor_app.domain.value_objects.car_type import CarType
from vendor_app.infrastructure.gateways.in_memory.vendor_backend import StubVendorBackend
from vendor_app.infrastructure.gateways.vendor_backend_http import VendorBackendHTTP
from vendor_app.infrastructure.in_memory.order_form_session_repo import (
    InMemoryOrderFormSessionRepo,
)


@lru_cache(maxsize=1)
def _in_memory_bundle():
    return {"backend": StubVendorBackend()}


@lru_cache(maxsize=1)
def _http_backend() -> VendorBackendHTTP:
    settings = get_settings()
    return VendorBackendHTTP(
        base_url=settings.api_base_url,
        auth=StaticTokenAuth(settings.api_access_token),
        timeout_seconds=settings.api_timeout_seconds,
    )


@lru_cache(maxsize=1)
def get_form_sessions() -> InMemoryOrderFormSessionRepo:
    # Form sessions live in process memory with either backend.
    return InMemoryOrderFormSessionRepo()


def get_backend(settings: Settings = Depends(get_settings)) -> VendorBackend:
    if settings.use_in_memory:
        return _in_memory_bundle()["backend"]
    return _http_backend()


async def close_backends() -> None:
    """Close the HTTP gateway if one was created."""
    if _http_backend.cache_info().currsize:
        await _http_backend().aclose()
        _http_backend.cache_clear()


def get_use_cases(
    settings: Settings = Depends(get_settings),
    backend: VendorBackend = Depends(get_backend),
):
    vendor_orders = VendorOrdersUseCase(backend)
    return {
        "load_dashboard": LoadDashboardUseCase(backend),
        "list_pending_orders": ListPendingOrdersUseCase(backend),
        "vendor_orders": vendor_orders,
        "vendor_home": LoadVendorHomeUseCase(backend, vendor_orders),
        "manage_order": ManageOrderUseCase(
            backend, recreate_max_time_minutes=settings.recreate_max_time_minutes
        ),
    }


def get_composer_factory(
    settings: Settings = Depends(get_settings),
    backend: VendorBackend = Depends(get_backend),
):
    def new_composer() -> OrderComposer:
        return OrderComposer(
            backend=backend,
            vendor_id=settings.vendor_id,
            default_car_type=CarType(settings.default_car_type),
            default_max_time_hours=settings.default_max_time_hours,
            default_max_time_minutes=settings.default_max_time_minutes,
        )

    return new_composer
