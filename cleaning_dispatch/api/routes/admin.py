"""
Admin dashboard routes.
"""

from typing import List, Optional
from uuid import UUID

from fastapi import APIRouter, Query

from cleaning_dispatch.api.dependencies import AdminDashboardDep
from cleaning_dispatch.api.schemas.cleaning_request import (
    AssignEmployeesRequest,
    CleaningRequestDetailResponse,
    CleaningRequestResponse,
    RequestSummaryResponse,
)
from cleaning_dispatch.api.schemas.profile import ProfileResponse
from cleaning_dispatch.config.logging import get_logger

logger = get_logger(__name__)
router = APIRouter(prefix="/admin", tags=["admin"])


@router.get("/requests", response_model=List[CleaningRequestDetailResponse])
async def list_requests(
    dashboard: AdminDashboardDep,
    status_filter: Optional[str] = Query(
        None, description="Status bucket or literal status"
    ),
):
    """All requests, newest first, with customers and assigned employees."""
    details = await dashboard.load(status_filter)
    return [CleaningRequestDetailResponse.from_details(d) for d in details]


@router.get("/summary", response_model=RequestSummaryResponse)
async def summary(dashboard: AdminDashboardDep):
    return RequestSummaryResponse.from_summary(await dashboard.summary())


@router.get("/employees", response_model=List[ProfileResponse])
async def list_employees(dashboard: AdminDashboardDep):
    employees = await dashboard.list_employees()
    return [ProfileResponse.from_entity(e) for e in employees]


@router.post("/requests/{request_id}/assign", response_model=CleaningRequestResponse)
async def assign_employees(
    request_id: UUID, body: AssignEmployeesRequest, dashboard: AdminDashboardDep
):
    """Staff a pending request with exactly employee_count employees."""
    request = await dashboard.assign(request_id, body.employee_ids)
    return CleaningRequestResponse.from_entity(request)


@router.post("/requests/{request_id}/complete", response_model=CleaningRequestResponse)
async def force_complete(request_id: UUID, dashboard: AdminDashboardDep):
    request = await dashboard.force_complete(request_id)
    return CleaningRequestResponse.from_entity(request)


@router.post("/requests/{request_id}/cancel", response_model=CleaningRequestResponse)
async def cancel_request(request_id: UUID, dashboard: AdminDashboardDep):
    request = await dashboard.cancel(request_id)
    return CleaningRequestResponse.from_entity(request)
