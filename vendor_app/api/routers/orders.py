from typing import Any

from fastapi import APIRouter, Depends, Query, status

from vendor_app.api.dependencies import get_use_cases
from vendor_app.api.schemas.orders import (
    OrderStatsResponse,
    OrderSummaryResponse,
    RecreateOrderRequest,
    ToggleVisibilityRequest,
    ToggleVisibilityResponse,
    VendorOrdersResponse,
)
from vendor_app.application.dtos.order_dto import OrderFilterDTO

router = APIRouter()


@router.get(
    "/orders/pending",
    response_model=list[OrderSummaryResponse],
    status_code=status.HTTP_200_OK,
)
async def list_pending_orders(use_cases=Depends(get_use_cases)) -> list[OrderSummaryResponse]:
    orders = await use_cases["list_pending_orders"].execute()
    return [OrderSummaryResponse.model_validate(order) for order in orders]


@router.get(
    "/orders/vendor",
    response_model=VendorOrdersResponse,
    status_code=status.HTTP_200_OK,
)
async def vendor_orders(
    search: str = Query(default=""),
    trip_status: str = Query(default="all", alias="status"),
    trip_type: str = Query(default="all"),
    car_type: str = Query(default="all"),
    accept_status: str = Query(default="all", pattern="^(all|accepted|pending)$"),
    use_cases=Depends(get_use_cases),
) -> VendorOrdersResponse:
    filters = OrderFilterDTO(
        search=search,
        status=trip_status,
        trip_type=trip_type,
        car_type=car_type,
        accept_status=accept_status,
    )
    home = await use_cases["vendor_home"].execute(filters)
    return VendorOrdersResponse(
        vendor=home.vendor,
        orders=[OrderSummaryResponse.model_validate(order) for order in home.orders.orders],
        stats=OrderStatsResponse.model_validate(home.orders.stats),
    )


@router.get("/orders/{order_id}", status_code=status.HTTP_200_OK)
async def get_order(order_id: int, use_cases=Depends(get_use_cases)) -> dict[str, Any]:
    return await use_cases["manage_order"].get_order(order_id)


@router.post("/orders/{order_id}/recreate", status_code=status.HTTP_201_CREATED)
async def recreate_order(
    order_id: int,
    payload: RecreateOrderRequest | None = None,
    use_cases=Depends(get_use_cases),
) -> dict[str, Any]:
    max_time = payload.max_time_to_assign_order if payload else None
    return await use_cases["manage_order"].recreate(order_id, max_time)


@router.post(
    "/orders/{order_id}/visibility",
    response_model=ToggleVisibilityResponse,
    status_code=status.HTTP_200_OK,
)
async def toggle_visibility(
    order_id: int,
    payload: ToggleVisibilityRequest | None = None,
    use_cases=Depends(get_use_cases),
) -> ToggleVisibilityResponse:
    currently_visible = payload.currently_visible if payload else None
    visible = await use_cases["manage_order"].toggle_visibility(order_id, currently_visible)
    return ToggleVisibilityResponse(order_id=order_id, data_visibility_vehicle_owner=visible)


@router.post("/orders/{order_id}/cancel", status_code=status.HTTP_200_OK)
async def cancel_order(order_id: int, use_cases=Depends(get_use_cases)) -> dict[str, Any]:
    manage_order = use_cases["manage_order"]
    order = await manage_order.get_order(order_id)
    return await manage_order.cancel(order_id, order)
