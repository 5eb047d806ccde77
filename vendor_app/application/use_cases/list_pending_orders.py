import logging

from vendor_app.application.dtos.order_dto import OrderSummaryDTO
from vendor_app.application.interfaces.vendor_backend import VendorBackend
from vendor_app.domain.errors import ApiError


class ListPendingOrdersUseCase:
    """All pending orders, keeping only those whose status is exactly PENDING."""

    def __init__(self, backend: VendorBackend) -> None:
        self._backend = backend
        self._logger = logging.getLogger(__name__)

    async def execute(self) -> list[OrderSummaryDTO]:
        try:
            body = await self._backend.get_pending_orders_all()
        except ApiError as exc:
            self._logger.error(
                "Failed to fetch pending orders",
                extra={"error_code": exc.code, "http_status": exc.status_code},
            )
            raise

        if not isinstance(body, list):
            return []

        orders = [OrderSummaryDTO.from_payload(row) for row in body if isinstance(row, dict)]
        pending = [order for order in orders if order.is_pending]
        self._logger.info(
            "Pending orders fetched",
            extra={"received": len(body), "pending": len(pending)},
        )
        return pending
