import asyncio
import logging
from decimal import Decimal
from typing import Any

from vendor_app.application.dtos.order_dto import (
    OrderFilterDTO,
    OrderStatsDTO,
    OrderSummaryDTO,
    VendorHomeDTO,
    VendorOrdersDTO,
)
from vendor_app.application.interfaces.vendor_backend import VendorBackend
from vendor_app.domain.errors import ApiError


def compute_stats(orders: list[OrderSummaryDTO]) -> OrderStatsDTO:
    return OrderStatsDTO(
        total_orders=len(orders),
        accepted_orders=sum(1 for order in orders if order.order_accept_status),
        total_revenue=sum((order.vendor_price for order in orders), Decimal("0")),
    )


def _matches_search(order: OrderSummaryDTO, query: str) -> bool:
    needle = query.lower()
    pickup = order.pickup_drop_location.get("0", "")
    drop = order.pickup_drop_location.get("1", "")
    return (
        needle in order.customer_name.lower()
        or needle in pickup.lower()
        or needle in drop.lower()
        or query in order.customer_number
    )


def apply_filters(orders: list[OrderSummaryDTO], filters: OrderFilterDTO) -> list[OrderSummaryDTO]:
    filtered = orders
    query = filters.search.strip()
    if query:
        filtered = [o for o in filtered if _matches_search(o, query)]
    if filters.status != "all":
        filtered = [o for o in filtered if o.trip_status == filters.status]
    if filters.trip_type != "all":
        filtered = [o for o in filtered if o.trip_type == filters.trip_type]
    if filters.car_type != "all":
        filtered = [o for o in filtered if o.car_type == filters.car_type]
    if filters.accept_status != "all":
        accepted = filters.accept_status == "accepted"
        filtered = [o for o in filtered if o.order_accept_status == accepted]
    return filtered


class VendorOrdersUseCase:
    """
    The vendor's own orders, newest first.

    A failed fetch degrades to an empty list so the screen still renders.
    Stats are computed over all orders, before filters are applied.
    """

    def __init__(self, backend: VendorBackend) -> None:
        self._backend = backend
        self._logger = logging.getLogger(__name__)

    async def execute(self, filters: OrderFilterDTO | None = None) -> VendorOrdersDTO:
        try:
            body = await self._backend.get_vendor_orders()
        except ApiError as exc:
            self._logger.error(
                "Error fetching vendor orders",
                extra={"error_code": exc.code, "http_status": exc.status_code},
            )
            body = []

        rows = body if isinstance(body, list) else []
        orders = [OrderSummaryDTO.from_payload(row) for row in rows if isinstance(row, dict)]
        # ISO timestamps sort lexically; rows without one go last.
        orders.sort(key=lambda order: order.created_at or "", reverse=True)

        stats = compute_stats(orders)
        if filters is not None:
            orders = apply_filters(orders, filters)
        return VendorOrdersDTO(orders=orders, stats=stats)


class LoadVendorHomeUseCase:
    """Loads the vendor profile and the orders list concurrently."""

    def __init__(self, backend: VendorBackend, orders_use_case: VendorOrdersUseCase) -> None:
        self._backend = backend
        self._orders_use_case = orders_use_case
        self._logger = logging.getLogger(__name__)

    async def execute(self, filters: OrderFilterDTO | None = None) -> VendorHomeDTO:
        vendor, orders = await asyncio.gather(
            self._load_vendor(),
            self._orders_use_case.execute(filters),
        )
        return VendorHomeDTO(vendor=vendor, orders=orders)

    async def _load_vendor(self) -> dict[str, Any] | None:
        try:
            return await self._backend.get_vendor_profile()
        except ApiError as exc:
            self._logger.error(
                "Error fetching vendor data",
                extra={"error_code": exc.code, "http_status": exc.status_code},
            )
            return None
