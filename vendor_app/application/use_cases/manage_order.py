import logging
from typing import Any

from vendor_app.application.interfaces.vendor_backend import VendorBackend
from vendor_app.domain.errors import ApiError, OrderNotCancellableError

DEFAULT_RECREATE_MAX_TIME_MINUTES = 30


class ManageOrderUseCase:
    """Actions available on the order details screen."""

    def __init__(
        self,
        backend: VendorBackend,
        recreate_max_time_minutes: int = DEFAULT_RECREATE_MAX_TIME_MINUTES,
    ) -> None:
        self._backend = backend
        self._recreate_max_time = recreate_max_time_minutes
        self._logger = logging.getLogger(__name__)

    async def get_order(self, order_id: int) -> dict[str, Any]:
        return await self._backend.get_order(order_id)

    async def recreate(self, order_id: int, max_time_to_assign_order: int | None = None) -> dict[str, Any]:
        """Recreate an auto-cancelled order with a fresh assignment window (minutes)."""
        max_time = max_time_to_assign_order or self._recreate_max_time
        try:
            created = await self._backend.recreate_order(order_id, max_time)
        except ApiError as exc:
            self._logger.error(
                "Error recreating order",
                extra={"order_id": order_id, "error_code": exc.code},
            )
            raise
        self._logger.info(
            "Order recreated", extra={"order_id": order_id, "max_time": max_time}
        )
        return created

    async def toggle_visibility(self, order_id: int, currently_visible: bool | None = None) -> bool:
        """
        Flip whether the vehicle owner can see customer data on this order.

        When the caller does not know the current flag, the order is fetched
        first. Returns the new flag.
        """
        if currently_visible is None:
            order = await self._backend.get_order(order_id)
            currently_visible = bool(order.get("data_visibility_vehicle_owner"))

        visible = not currently_visible
        await self._backend.set_vehicle_owner_visibility(order_id, visible)
        self._logger.info(
            "Vehicle owner data visibility updated",
            extra={"order_id": order_id, "visible": visible},
        )
        return visible

    async def cancel(self, order_id: int, order: dict[str, Any] | None = None) -> dict[str, Any]:
        """Cancel a pending order. A known non-pending order is rejected locally."""
        if order is not None:
            status = str(order.get("trip_status") or "").strip().upper()
            if status != "PENDING":
                raise OrderNotCancellableError(order_id, status)

        try:
            result = await self._backend.cancel_order(order_id)
        except ApiError as exc:
            self._logger.error(
                "Error cancelling order",
                extra={"order_id": order_id, "error_code": exc.code},
            )
            raise
        self._logger.info("Order cancelled", extra={"order_id": order_id})
        return result
