"""
Cleaning request API schemas.
"""

from datetime import date, datetime, time
from decimal import Decimal
from typing import List, Optional
from uuid import UUID

from pydantic import BaseModel, Field

from cleaning_dispatch.application.commands import CreateRequestCommand
from cleaning_dispatch.application.services.request_filters import RequestSummary
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestDetails,
)
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.value_objects.home_size import HomeSize
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus

from .profile import ProfileResponse


class LocationSchema(BaseModel):
    """Location schema."""

    city: str = Field(..., max_length=100)
    district: str = Field(..., max_length=100)
    neighborhood: str = Field(..., max_length=100)
    address_detail: str = Field(..., max_length=500)


class CleaningRequestCreate(BaseModel):
    """Booking form submitted by a customer."""

    location: LocationSchema
    service_date: date
    service_time: time
    home_size: HomeSize = HomeSize.MEDIUM
    employee_count: int = Field(1, description="Number of employees, 1 to 5")
    special_notes: Optional[str] = Field(None, max_length=2000)

    def to_command(self) -> CreateRequestCommand:
        return CreateRequestCommand(
            city=self.location.city,
            district=self.location.district,
            neighborhood=self.location.neighborhood,
            address_detail=self.location.address_detail,
            service_date=self.service_date,
            service_time=self.service_time,
            home_size=self.home_size,
            employee_count=self.employee_count,
            special_notes=self.special_notes,
        )


class AssignEmployeesRequest(BaseModel):
    """Employees an admin selects for a pending request."""

    employee_ids: List[UUID] = Field(..., description="Distinct employee profile ids")


class CleaningRequestResponse(BaseModel):
    """Cleaning request response schema."""

    id: UUID
    customer_id: UUID
    location: LocationSchema
    address: str
    service_date: date
    service_time: time
    home_size: HomeSize
    employee_count: int
    special_notes: Optional[str] = None
    status: RequestStatus
    price: Optional[Decimal] = None
    assigned_employee_ids: List[UUID] = Field(default_factory=list)
    completed_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    @classmethod
    def from_entity(cls, request: CleaningRequest) -> "CleaningRequestResponse":
        return cls(
            id=request.id,
            customer_id=request.customer_id,
            location=LocationSchema(**request.location.to_dict()),
            address=request.address,
            service_date=request.service_date,
            service_time=request.service_time,
            home_size=request.home_size,
            employee_count=request.employee_count,
            special_notes=request.special_notes,
            status=request.status,
            price=request.price,
            assigned_employee_ids=list(request.assigned_employee_ids),
            completed_at=request.completed_at,
            confirmed_at=request.confirmed_at,
            created_at=request.created_at,
            updated_at=request.updated_at,
        )


class CleaningRequestDetailResponse(CleaningRequestResponse):
    """A request with its customer and assigned employees."""

    customer: Optional[ProfileResponse] = None
    employees: List[ProfileResponse] = Field(default_factory=list)

    @classmethod
    def from_details(cls, details: RequestDetails) -> "CleaningRequestDetailResponse":
        base = CleaningRequestResponse.from_entity(details.request)
        return cls(
            **base.model_dump(),
            customer=(
                ProfileResponse.from_entity(details.customer)
                if details.customer
                else None
            ),
            employees=[ProfileResponse.from_entity(e) for e in details.employees],
        )


class RequestSummaryResponse(BaseModel):
    """Dashboard counters."""

    total: int
    pending: int
    active: int
    awaiting_confirmation: int
    completed: int
    cancelled: int

    @classmethod
    def from_summary(cls, summary: RequestSummary) -> "RequestSummaryResponse":
        return cls(
            total=summary.total,
            pending=summary.pending,
            active=summary.active,
            awaiting_confirmation=summary.awaiting_confirmation,
            completed=summary.completed,
            cancelled=summary.cancelled,
        )
