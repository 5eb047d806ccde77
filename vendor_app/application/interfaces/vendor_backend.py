"""Interface VendorBackend - port to the marketplace REST backend."""

from abc import ABC, abstractmethod
from dataclasses import dataclass, field
from typing import Any

from vendor_app.domain.errors import ApiError


@dataclass
class EndpointResult:
    """Outcome of a GET against one candidate endpoint."""

    path: str
    body: Any = None
    error: ApiError | None = None

    @property
    def ok(self) -> bool:
        return self.error is None

    @property
    def items(self) -> list[Any] | None:
        """The body when it is a well-formed array, otherwise None."""
        if self.ok and isinstance(self.body, list):
            return self.body
        return None


@dataclass
class QuoteRequest:
    """Which backend endpoint family a quote/confirm payload goes to."""

    hourly: bool
    payload: dict[str, Any] = field(default_factory=dict)


class VendorBackend(ABC):
    """
    Port to the backend used by the vendor and driver screens.

    Every method raises an ApiError subclass on failure, except try_get_list
    which reports the failure inside the returned EndpointResult.
    """

    @abstractmethod
    async def try_get_list(self, path: str) -> EndpointResult:
        """GET a candidate list endpoint without raising."""
        raise NotImplementedError

    @abstractmethod
    async def get_vehicle_owner_me(self) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def get_vendor_profile(self) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def get_pending_orders_all(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def get_vendor_orders(self) -> Any:
        raise NotImplementedError

    @abstractmethod
    async def get_order(self, order_id: int) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def get_package_hours(self) -> Any:
        """Available hourly-rental packages, as returned by the backend."""
        raise NotImplementedError

    @abstractmethod
    async def request_quote(self, request: QuoteRequest) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def confirm_order(self, request: QuoteRequest) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def recreate_order(self, order_id: int, max_time_to_assign_order: int) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def set_vehicle_owner_visibility(self, order_id: int, visible: bool) -> dict[str, Any]:
        raise NotImplementedError

    @abstractmethod
    async def cancel_order(self, order_id: int) -> dict[str, Any]:
        raise NotImplementedError

    async def aclose(self) -> None:
        """Release transport resources. Nothing to release by default."""
        return None
