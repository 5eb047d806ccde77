import logging
from typing import Any

import httpx

from vendor_app.application.interfaces.auth import AuthHeaderProvider
from vendor_app.application.interfaces.vendor_backend import (
    EndpointResult,
    QuoteRequest,
    VendorBackend,
)
from vendor_app.domain.errors import (
    ApiError,
    AuthError,
    NetworkError,
    RequestTimeoutError,
    ServerError,
    UnknownApiError,
)

logger = logging.getLogger(__name__)

VEHICLE_OWNER_ME_PATH = "/api/users/vehicle-owner/me"
VENDOR_PROFILE_PATH = "/users/vendor-details/me"
PENDING_ORDERS_ALL_PATH = "/api/orders/pending-all"
VENDOR_ORDERS_PATH = "/orders/pending/vendor"
PACKAGE_HOURS_PATH = "/orders/rental_hrs_data"
RECREATE_ORDER_PATH = "/orders/recreate"

QUOTE_PATHS = {False: "/orders/quote", True: "/orders/hourly/quote"}
CONFIRM_PATHS = {False: "/orders/create", True: "/orders/hourly/create"}


def _extract_detail(body: Any) -> str | None:
    if not isinstance(body, dict):
        return None
    detail = body.get("detail")
    if isinstance(detail, str):
        return detail or None
    if isinstance(detail, list):
        # FastAPI validation errors: [{"msg": ...}, ...]
        messages = [item.get("msg") for item in detail if isinstance(item, dict) and item.get("msg")]
        return "; ".join(messages) or None
    return str(detail) if detail else None


def _decode(response: httpx.Response) -> Any:
    if not response.content:
        return None
    try:
        return response.json()
    except ValueError:
        return None


def classify_response(response: httpx.Response) -> ApiError:
    """Map a non-2xx response onto the error taxonomy."""
    detail = _extract_detail(_decode(response))
    status_code = response.status_code
    if status_code == 401:
        return AuthError(detail=detail)
    if status_code >= 500:
        return ServerError(status_code=status_code, detail=detail)
    return UnknownApiError(
        message=f"Request failed with status code {status_code}",
        status_code=status_code,
        detail=detail,
    )


def classify_exception(exc: httpx.HTTPError) -> ApiError:
    """Map a transport failure onto the error taxonomy."""
    if isinstance(exc, httpx.TimeoutException):
        return RequestTimeoutError()
    if isinstance(exc, httpx.TransportError):
        return NetworkError()
    return UnknownApiError(message=str(exc) or None)


class VendorBackendHTTP(VendorBackend):
    def __init__(
        self,
        base_url: str,
        auth: AuthHeaderProvider,
        timeout_seconds: float = 10.0,
        client: httpx.AsyncClient | None = None,
    ) -> None:
        """
        HTTP gateway to the marketplace backend.

        Args:
            base_url: Backend base URL; paths are appended to it.
            auth: Produces the bearer token header for every call.
            timeout_seconds: Transport timeout. Only classified here, never retried.
            client: Shared client to use instead of creating one.
        """
        self._auth = auth
        self._owns_client = client is None
        self._client = client or httpx.AsyncClient(
            base_url=base_url.rstrip("/"), timeout=timeout_seconds
        )

    async def aclose(self) -> None:
        if self._owns_client:
            await self._client.aclose()

    async def _request(
        self,
        method: str,
        path: str,
        json: dict[str, Any] | None = None,
        authenticated: bool = True,
    ) -> Any:
        headers = await self._auth.get_auth_headers() if authenticated else {}
        try:
            response = await self._client.request(method, path, json=json, headers=headers)
        except httpx.HTTPError as exc:
            error = classify_exception(exc)
            logger.warning(
                "Backend request failed",
                extra={"method": method, "path": path, "error_code": error.code, "reason": str(exc)},
            )
            raise error from exc

        if not response.is_success:
            error = classify_response(response)
            logger.warning(
                "Backend returned an error status",
                extra={
                    "method": method,
                    "path": path,
                    "http_status": response.status_code,
                    "error_code": error.code,
                },
            )
            raise error

        return _decode(response)

    async def try_get_list(self, path: str) -> EndpointResult:
        try:
            body = await self._request("GET", path)
        except ApiError as exc:
            return EndpointResult(path=path, error=exc)
        return EndpointResult(path=path, body=body)

    async def get_vehicle_owner_me(self) -> dict[str, Any]:
        return await self._request("GET", VEHICLE_OWNER_ME_PATH)

    async def get_vendor_profile(self) -> dict[str, Any]:
        return await self._request("GET", VENDOR_PROFILE_PATH)

    async def get_pending_orders_all(self) -> Any:
        return await self._request("GET", PENDING_ORDERS_ALL_PATH)

    async def get_vendor_orders(self) -> Any:
        return await self._request("GET", VENDOR_ORDERS_PATH)

    async def get_order(self, order_id: int) -> dict[str, Any]:
        return await self._request("GET", f"/orders/vendor/{order_id}")

    async def get_package_hours(self) -> Any:
        # Public configuration endpoint.
        return await self._request("GET", PACKAGE_HOURS_PATH, authenticated=False)

    async def request_quote(self, request: QuoteRequest) -> dict[str, Any]:
        return await self._request("POST", QUOTE_PATHS[request.hourly], json=request.payload)

    async def confirm_order(self, request: QuoteRequest) -> dict[str, Any]:
        return await self._request("POST", CONFIRM_PATHS[request.hourly], json=request.payload)

    async def recreate_order(self, order_id: int, max_time_to_assign_order: int) -> dict[str, Any]:
        return await self._request(
            "POST",
            RECREATE_ORDER_PATH,
            json={"order_id": order_id, "max_time_to_assign_order": max_time_to_assign_order},
        )

    async def set_vehicle_owner_visibility(self, order_id: int, visible: bool) -> dict[str, Any]:
        return await self._request(
            "PATCH",
            f"/orders/{order_id}/visibility/vehicle-owner/show",
            json={"data_visibility_vehicle_owner": visible},
        )

    async def cancel_order(self, order_id: int) -> dict[str, Any]:
        return await self._request("PATCH", f"/assignments/vendor/cancel-order/{order_id}")
