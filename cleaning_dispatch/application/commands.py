"""
Typed command objects, one per request mutation.

Commands validate their own payload on construction so nothing malformed
reaches the workflow engine or the store.
"""

from dataclasses import dataclass
from datetime import date, time
from typing import ClassVar, Optional, Tuple
from uuid import UUID

from cleaning_dispatch.domain.entities.cleaning_request import (
    MAX_EMPLOYEE_COUNT,
    MIN_EMPLOYEE_COUNT,
)
from cleaning_dispatch.domain.exceptions.validation_error import (
    InvalidInputError,
    RequiredFieldError,
)
from cleaning_dispatch.domain.value_objects.home_size import HomeSize
from cleaning_dispatch.domain.value_objects.location import Location
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole


@dataclass(frozen=True)
class CreateRequestCommand:
    """Customer booking a cleaning."""

    city: str
    district: str
    neighborhood: str
    address_detail: str
    service_date: date
    service_time: time
    home_size: HomeSize = HomeSize.MEDIUM
    employee_count: int = 1
    special_notes: Optional[str] = None

    def __post_init__(self):
        # Location validates the four address fields
        self.location
        if not self.service_date:
            raise RequiredFieldError("service_date")
        if not self.service_time:
            raise RequiredFieldError("service_time")
        try:
            object.__setattr__(self, "home_size", HomeSize(self.home_size))
        except ValueError:
            raise InvalidInputError(
                "home_size", self.home_size, ", ".join(s.value for s in HomeSize)
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

    @property
    def location(self) -> Location:
        return Location(
            city=self.city,
            district=self.district,
            neighborhood=self.neighborhood,
            address_detail=self.address_detail,
        )


@dataclass(frozen=True)
class AssignCommand:
    """Admin selecting the employees for a pending request."""

    request_id: UUID
    employee_ids: Tuple[UUID, ...]

    def __post_init__(self):
        if not self.request_id:
            raise RequiredFieldError("request_id")
        employee_ids = tuple(self.employee_ids or ())
        if len(set(employee_ids)) != len(employee_ids):
            raise InvalidInputError(
                "employee_ids", [str(e) for e in employee_ids], "distinct employees"
            )
        object.__setattr__(self, "employee_ids", employee_ids)


@dataclass(frozen=True)
class StatusCommand:
    """Base for commands that only move a request along the workflow."""

    request_id: UUID

    transition_name: ClassVar[str]
    target_status: ClassVar[RequestStatus]

    def __post_init__(self):
        if not self.request_id:
            raise RequiredFieldError("request_id")


@dataclass(frozen=True)
class MarkAwaitingConfirmationCommand(StatusCommand):
    """Employee reporting the cleaning as done."""

    transition_name: ClassVar[str] = "mark_awaiting_confirmation"
    target_status: ClassVar[RequestStatus] = RequestStatus.AWAITING_CONFIRMATION


@dataclass(frozen=True)
class ConfirmCompletionCommand(StatusCommand):
    transition_name: ClassVar[str] = "confirm_completion"
    target_status: ClassVar[RequestStatus] = RequestStatus.COMPLETED


@dataclass(frozen=True)
class RejectCompletionCommand(StatusCommand):
    transition_name: ClassVar[str] = "reject_completion"
    target_status: ClassVar[RequestStatus] = RequestStatus.ASSIGNED


@dataclass(frozen=True)
class ForceCompleteCommand(StatusCommand):
    """Admin closing an assigned request without the confirmation loop."""

    transition_name: ClassVar[str] = "force_complete"
    target_status: ClassVar[RequestStatus] = RequestStatus.COMPLETED


@dataclass(frozen=True)
class CancelRequestCommand(StatusCommand):
    transition_name: ClassVar[str] = "cancel"
    target_status: ClassVar[RequestStatus] = RequestStatus.CANCELLED


@dataclass(frozen=True)
class RegisterProfileCommand:
    """Profile row for an identity created by the auth provider."""

    id: UUID
    email: str
    full_name: str
    role: UserRole = UserRole.CUSTOMER
    phone: Optional[str] = None

    def __post_init__(self):
        if not self.id:
            raise RequiredFieldError("id")
        try:
            object.__setattr__(self, "role", UserRole(self.role))
        except ValueError:
            raise InvalidInputError(
                "role", self.role, ", ".join(r.value for r in UserRole)
            )
