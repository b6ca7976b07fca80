"""
Customer dashboard routes.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query, status

from cleaning_dispatch.api.dependencies import CustomerDashboardDep
from cleaning_dispatch.api.schemas.cleaning_request import (
    CleaningRequestCreate,
    CleaningRequestDetailResponse,
    CleaningRequestResponse,
    RequestSummaryResponse,
)
from cleaning_dispatch.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/customer", tags=["customer"])


@router.get("/requests", response_model=List[CleaningRequestDetailResponse])
async def list_requests(
    dashboard: CustomerDashboardDep,
    status_filter: Optional[str] = Query(
        None, description="Status bucket or literal status"
    ),
):
    """The signed-in customer's requests, newest first."""
    details = await dashboard.load(status_filter)
    return [CleaningRequestDetailResponse.from_details(d) for d in details]


@router.post(
    "/requests",
    response_model=CleaningRequestResponse,
    status_code=status.HTTP_201_CREATED,
)
async def create_request(body: CleaningRequestCreate, dashboard: CustomerDashboardDep):
    """Book a cleaning. The request starts pending with its price fixed."""
    request = await dashboard.create(body.to_command())
    return CleaningRequestResponse.from_entity(request)


@router.get("/summary", response_model=RequestSummaryResponse)
async def summary(dashboard: CustomerDashboardDep):
    return RequestSummaryResponse.from_summary(await dashboard.summary())


@router.post("/requests/{request_id}/confirm", response_model=CleaningRequestResponse)
async def confirm_completion(request_id: UUID, dashboard: CustomerDashboardDep):
    request = await dashboard.confirm(request_id)
    return CleaningRequestResponse.from_entity(request)


@router.post("/requests/{request_id}/reject", response_model=CleaningRequestResponse)
async def reject_completion(request_id: UUID, dashboard: CustomerDashboardDep):
    """Send a reported completion back to the assigned employees."""
    request = await dashboard.reject(request_id)
    return CleaningRequestResponse.from_entity(request)


@router.post("/requests/{request_id}/cancel", response_model=CleaningRequestResponse)
async def cancel_request(request_id: UUID, dashboard: CustomerDashboardDep):
    request = await dashboard.cancel(request_id)
    return CleaningRequestResponse.from_entity(request)
