"""
Employee dashboard routes.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query

from cleaning_dispatch.api.dependencies import EmployeeDashboardDep
from cleaning_dispatch.api.schemas.cleaning_request import (
    CleaningRequestDetailResponse,
    CleaningRequestResponse,
    RequestSummaryResponse,
)
from cleaning_dispatch.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/employee", tags=["employee"])


@router.get("/requests", response_model=List[CleaningRequestDetailResponse])
async def list_requests(
    dashboard: EmployeeDashboardDep,
    status_filter: Optional[str] = Query(
        None, description="Status bucket or literal status"
    ),
):
    """Requests assigned to the signed-in employee, by service date."""
    details = await dashboard.load(status_filter)
    return [CleaningRequestDetailResponse.from_details(d) for d in details]


@router.get("/summary", response_model=RequestSummaryResponse)
async def summary(dashboard: EmployeeDashboardDep):
    return RequestSummaryResponse.from_summary(await dashboard.summary())


@router.post("/requests/{request_id}/complete", response_model=CleaningRequestResponse)
async def mark_completed(request_id: UUID, dashboard: EmployeeDashboardDep):
    """Report the cleaning done and wait for the customer to confirm."""
    request = await dashboard.mark_completed(request_id)
    return CleaningRequestResponse.from_entity(request)
