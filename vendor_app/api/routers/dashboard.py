from fastapi import APIRouter, Depends, status

from vendor_app.api.dependencies import get_use_cases
from vendor_app.api.schemas.orders import DashboardResponse

router = APIRouter()


@router.get(
    "/dashboard",
    response_model=DashboardResponse,
    status_code=status.HTTP_200_OK,
)
async def get_dashboard(use_cases=Depends(get_use_cases)) -> DashboardResponse:
    dashboard = await use_cases["load_dashboard"].execute()
    return DashboardResponse.model_validate(dashboard)
