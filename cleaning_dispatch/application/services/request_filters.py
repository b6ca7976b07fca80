"""
Role-based filtering helpers for cleaning requests.
"""

from dataclasses import dataclass
from enum import Enum
from typing import Dict, FrozenSet, Iterable, Optional
from uuid import UUID

from cleaning_dispatch.application.session import SessionContext
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.exceptions.validation_error import (
    InvalidInputError,
    RequiredFieldError,
)
from cleaning_dispatch.domain.exceptions.workflow_error import PermissionDeniedError
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class FilterScope(str, Enum):
    """Which slice of the request table a listing covers."""

    ALL = "all"
    CUSTOMER = "customer"
    EMPLOYEE = "employee"


@dataclass(frozen=True)
class RequestFilter:
    """Listing filter: a scope plus an optional status set."""

    scope: FilterScope = FilterScope.ALL
    profile_id: Optional[UUID] = None
    statuses: Optional[FrozenSet[RequestStatus]] = None

    def __post_init__(self):
        if self.scope != FilterScope.ALL and not self.profile_id:
            raise RequiredFieldError("profile_id")

    @classmethod
    def all(cls, statuses: Optional[Iterable[RequestStatus]] = None) -> "RequestFilter":
        return cls(FilterScope.ALL, None, _freeze(statuses))

    @classmethod
    def by_customer(
        cls, customer_id: UUID, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> "RequestFilter":
        return cls(FilterScope.CUSTOMER, customer_id, _freeze(statuses))

    @classmethod
    def by_employee(
        cls, employee_id: UUID, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> "RequestFilter":
        return cls(FilterScope.EMPLOYEE, employee_id, _freeze(statuses))


def _freeze(statuses: Optional[Iterable[RequestStatus]]) -> Optional[FrozenSet[RequestStatus]]:
    if statuses is None:
        return None
    return frozenset(RequestStatus(s) for s in statuses)


# Dashboard tabs; "active" groups the two statuses employees work in
STATUS_BUCKETS: Dict[str, FrozenSet[RequestStatus]] = {
    "pending": frozenset({RequestStatus.PENDING}),
    "active": frozenset(s for s in RequestStatus if s.is_active()),
    "awaiting_confirmation": frozenset({RequestStatus.AWAITING_CONFIRMATION}),
    "completed": frozenset({RequestStatus.COMPLETED}),
    "cancelled": frozenset({RequestStatus.CANCELLED}),
}


def statuses_for_bucket(bucket: Optional[str]) -> Optional[FrozenSet[RequestStatus]]:
    """Resolve a dashboard tab or a literal status to a status set."""
    if bucket is None or bucket == "" or bucket == "all":
        return None
    if bucket in STATUS_BUCKETS:
        return STATUS_BUCKETS[bucket]
    try:
        return frozenset({RequestStatus(bucket)})
    except ValueError:
        allowed = sorted(set(STATUS_BUCKETS) | {s.value for s in RequestStatus})
        raise InvalidInputError("status_filter", bucket, ", ".join(allowed))


def filter_for_session(
    context: SessionContext, statuses: Optional[Iterable[RequestStatus]] = None
) -> RequestFilter:
    """The listing a role is entitled to see."""
    if context.role == UserRole.ADMIN:
        return RequestFilter.all(statuses)
    if context.role == UserRole.CUSTOMER:
        return RequestFilter.by_customer(context.profile_id, statuses)
    return RequestFilter.by_employee(context.profile_id, statuses)


def ensure_can_act_on(context: SessionContext, request: CleaningRequest) -> None:
    """Customers act on their own requests, employees on their assignments."""
    if context.role == UserRole.CUSTOMER and not request.is_owned_by(context.profile_id):
        raise PermissionDeniedError(
            context.role.value, f"act on request {request.id} of another customer"
        )
    if context.role == UserRole.EMPLOYEE and not request.is_assigned_to(
        context.profile_id
    ):
        raise PermissionDeniedError(
            context.role.value, f"act on request {request.id} not assigned to them"
        )


@dataclass(frozen=True)
class RequestSummary:
    """Counts shown on top of every dashboard."""

    total: int = 0
    pending: int = 0
    active: int = 0
    awaiting_confirmation: int = 0
    completed: int = 0
    cancelled: int = 0


def summarize(requests: Iterable[CleaningRequest]) -> RequestSummary:
    counts = {bucket: 0 for bucket in STATUS_BUCKETS}
    total = 0
    for request in requests:
        total += 1
        for bucket, statuses in STATUS_BUCKETS.items():
            if request.status in statuses:
                counts[bucket] += 1
    return RequestSummary(total=total, **counts)
