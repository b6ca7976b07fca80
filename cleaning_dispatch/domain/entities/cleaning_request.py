"""Cleaning request domain entity."""

from dataclasses import dataclass, field
from datetime import date, datetime, time, timezone
from decimal import Decimal
from typing import List, Optional
from uuid import UUID, uuid4

from cleaning_dispatch.domain.exceptions.validation_error import (
    InvalidInputError,
    RequiredFieldError,
)
from cleaning_dispatch.domain.value_objects.home_size import HomeSize
from cleaning_dispatch.domain.value_objects.location import Location
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus

MIN_EMPLOYEE_COUNT = 1
MAX_EMPLOYEE_COUNT = 5


@dataclass
class CleaningRequest:
    """A customer's booking for a cleaning at a given place and time."""

    customer_id: UUID
    location: Location
    service_date: date
    service_time: time
    home_size: HomeSize
    employee_count: int = 1
    special_notes: Optional[str] = None
    id: UUID = field(default_factory=uuid4)
    status: RequestStatus = RequestStatus.PENDING
    price: Optional[Decimal] = None
    completed_at: Optional[datetime] = None
    confirmed_at: Optional[datetime] = None
    created_at: Optional[datetime] = None
    updated_at: Optional[datetime] = None

    # Employees currently linked through request_assignments
    assigned_employee_ids: List[UUID] = field(default_factory=list)

    def __post_init__(self):
        """Validate request data."""
        if not self.customer_id:
            raise RequiredFieldError("customer_id")
        if not self.location:
            raise RequiredFieldError("location")
        if not self.service_date:
            raise RequiredFieldError("service_date")
        if not self.service_time:
            raise RequiredFieldError("service_time")

        try:
            self.home_size = HomeSize(self.home_size)
        except ValueError:
            raise InvalidInputError(
                "home_size", self.home_size, ", ".join(s.value for s in HomeSize)
            )
        try:
            self.status = RequestStatus(self.status)
        except ValueError:
            raise InvalidInputError(
                "status", self.status, ", ".join(s.value for s in RequestStatus)
            )

        if (
            isinstance(self.employee_count, bool)
            or not isinstance(self.employee_count, int)
            or not MIN_EMPLOYEE_COUNT <= self.employee_count <= MAX_EMPLOYEE_COUNT
        ):
            raise InvalidInputError(
                "employee_count",
                self.employee_count,
                f"{MIN_EMPLOYEE_COUNT}-{MAX_EMPLOYEE_COUNT}",
            )

        if self.special_notes is not None and not self.special_notes.strip():
            self.special_notes = None

        # Set timestamps if not provided
        if not self.created_at:
            self.created_at = datetime.now(timezone.utc)
        if not self.updated_at:
            self.updated_at = self.created_at

    @property
    def address(self) -> str:
        """Get formatted location."""
        return self.location.full_address

    def is_owned_by(self, profile_id: UUID) -> bool:
        return self.customer_id == profile_id

    def is_assigned_to(self, employee_id: UUID) -> bool:
        return employee_id in self.assigned_employee_ids

    def to_dict(self) -> dict:
        """Convert request to dictionary."""
        return {
            "id": str(self.id),
            "customer_id": str(self.customer_id),
            **self.location.to_dict(),
            "address": self.address,
            "service_date": self.service_date.isoformat(),
            "service_time": self.service_time.strftime("%H:%M"),
            "home_size": self.home_size.value,
            "employee_count": self.employee_count,
            "special_notes": self.special_notes,
            "status": self.status.value,
            "price": str(self.price) if self.price is not None else None,
            "assigned_employee_ids": [str(e) for e in self.assigned_employee_ids],
            "completed_at": self.completed_at.isoformat() if self.completed_at else None,
            "confirmed_at": self.confirmed_at.isoformat() if self.confirmed_at else None,
            "created_at": self.created_at.isoformat() if self.created_at else None,
            "updated_at": self.updated_at.isoformat() if self.updated_at else None,
        }
