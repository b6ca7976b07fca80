"""
Request store gateway.

CRUD façade over the profiles, cleaning_requests and request_assignments
tables. The gateway is transition-agnostic: it persists whatever status it is
given, legality is checked by the workflow engine before it gets here.
"""

from dataclasses import dataclass, field
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from cleaning_dispatch.application.commands import CreateRequestCommand
from cleaning_dispatch.application.interfaces.repositories import (
    CleaningRequestRepositoryInterface,
    ProfileRepositoryInterface,
    RequestAssignmentRepositoryInterface,
)
from cleaning_dispatch.application.services.pricing_calculator import PricingCalculator
from cleaning_dispatch.application.services.request_filters import (
    FilterScope,
    RequestFilter,
)
from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.exceptions.not_found_error import NotFoundError
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole
from cleaning_dispatch.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)

logger = get_logger(__name__)


@dataclass
class RequestDetails:
    """A request with the profiles a dashboard shows next to it."""

    request: CleaningRequest
    customer: Optional[Profile] = None
    employees: List[Profile] = field(default_factory=list)


class RequestStoreGateway:
    """Persistence façade used by use cases and dashboards."""

    def __init__(
        self,
        request_repo: CleaningRequestRepositoryInterface,
        assignment_repo: RequestAssignmentRepositoryInterface,
        profile_repo: ProfileRepositoryInterface,
        transaction_service: TransactionService,
        pricing: Optional[PricingCalculator] = None,
    ):
        self.request_repo = request_repo
        self.assignment_repo = assignment_repo
        self.profile_repo = profile_repo
        self.transaction_service = transaction_service
        self.pricing = pricing or PricingCalculator()
        self.logger = logger

    async def create_request(
        self, customer_id: UUID, command: CreateRequestCommand
    ) -> CleaningRequest:
        """Insert a pending request priced from its size and headcount."""
        request = CleaningRequest(
            customer_id=customer_id,
            location=command.location,
            service_date=command.service_date,
            service_time=command.service_time,
            home_size=command.home_size,
            employee_count=command.employee_count,
            special_notes=command.special_notes,
            status=RequestStatus.PENDING,
            price=self.pricing.price(command.home_size, command.employee_count),
        )

        created = await self.transaction_service.execute_in_transaction(
            lambda: self.request_repo.create(request), name="create_request"
        )

        self.logger.info(
            "Cleaning request created",
            request_id=str(created.id),
            customer_id=str(customer_id),
            home_size=created.home_size.value,
            employee_count=created.employee_count,
            price=str(created.price) if created.price is not None else None,
        )
        return created

    async def get_request(self, request_id: UUID) -> CleaningRequest:
        """Load a request with its assigned employee IDs."""

        async def load() -> Optional[CleaningRequest]:
            request = await self.request_repo.get_by_id(request_id)
            if request:
                request.assigned_employee_ids = (
                    await self.assignment_repo.get_employee_ids(request.id)
                )
            return request

        request = await self.transaction_service.read(load, name="get_request")
        if not request:
            raise NotFoundError("Cleaning request", request_id)
        return request

    async def list_requests(self, request_filter: RequestFilter) -> List[RequestDetails]:
        """
        List requests for one scope.

        All and customer scopes are ordered newest first, the employee scope by
        service date. Customers and employees are attached with one batched
        lookup per table.
        """

        async def load() -> List[RequestDetails]:
            requests = await self._find(request_filter)
            return await self._with_details(requests)

        return await self.transaction_service.read(load, name="list_requests")

    async def update_status(
        self,
        request_id: UUID,
        new_status: RequestStatus,
        extra_fields: Optional[Dict[str, Any]] = None,
    ) -> CleaningRequest:
        """Persist a status and its accompanying timestamp fields."""
        updated = await self.transaction_service.execute_in_transaction(
            lambda: self.request_repo.update_status(
                request_id, new_status, extra_fields
            ),
            name="update_status",
        )
        updated.assigned_employee_ids = await self.transaction_service.read(
            lambda: self.assignment_repo.get_employee_ids(request_id),
            name="get_assignments",
        )

        self.logger.info(
            "Cleaning request status updated",
            request_id=str(request_id),
            status=updated.status.value,
        )
        return updated

    async def assign_employees(
        self, request_id: UUID, employee_ids: Iterable[UUID]
    ) -> CleaningRequest:
        """
        Replace the assignment set of a request.

        The delete, the inserts and the status update share one transaction,
        so a failure part way leaves the previous assignment and status intact.
        Status becomes assigned only when the new set is non-empty.
        """
        employee_ids = list(employee_ids)

        async def assign() -> CleaningRequest:
            request = await self.request_repo.get_by_id(request_id)
            if not request:
                raise NotFoundError("Cleaning request", request_id)

            assigned = await self.assignment_repo.replace_for_request(
                request_id, employee_ids
            )
            if assigned:
                request = await self.request_repo.update_status(
                    request_id, RequestStatus.ASSIGNED
                )
            request.assigned_employee_ids = assigned
            return request

        request = await self.transaction_service.execute_in_transaction(
            assign, name="assign_employees"
        )

        self.logger.info(
            "Employees assigned",
            request_id=str(request_id),
            employee_ids=[str(e) for e in employee_ids],
            status=request.status.value,
        )
        return request

    async def list_employees(self) -> List[Profile]:
        """All profiles with the employee role."""
        return await self.transaction_service.read(
            lambda: self.profile_repo.find_by_role(UserRole.EMPLOYEE),
            name="list_employees",
        )

    async def get_profiles(self, profile_ids: Iterable[UUID]) -> Dict[UUID, Profile]:
        profile_ids = list(profile_ids)
        return await self.transaction_service.read(
            lambda: self.profile_repo.get_by_ids(profile_ids), name="get_profiles"
        )

    async def find_profile(self, profile_id: UUID) -> Optional[Profile]:
        return await self.transaction_service.read(
            lambda: self.profile_repo.get_by_id(profile_id), name="get_profile"
        )

    async def find_profile_by_email(self, email: str) -> Optional[Profile]:
        return await self.transaction_service.read(
            lambda: self.profile_repo.get_by_email(email), name="get_profile_by_email"
        )

    async def get_profile(self, profile_id: UUID) -> Profile:
        profile = await self.find_profile(profile_id)
        if not profile:
            raise NotFoundError("Profile", profile_id)
        return profile

    async def register_profile(self, profile: Profile) -> Profile:
        created = await self.transaction_service.execute_in_transaction(
            lambda: self.profile_repo.create(profile), name="register_profile"
        )
        self.logger.info(
            "Profile registered", profile_id=str(created.id), role=created.role.value
        )
        return created

    async def _find(self, request_filter: RequestFilter) -> List[CleaningRequest]:
        if request_filter.scope == FilterScope.CUSTOMER:
            return await self.request_repo.find_by_customer(
                request_filter.profile_id, request_filter.statuses
            )
        if request_filter.scope == FilterScope.EMPLOYEE:
            return await self.request_repo.find_by_employee(
                request_filter.profile_id, request_filter.statuses
            )
        return await self.request_repo.find_all(request_filter.statuses)

    async def _with_details(
        self, requests: List[CleaningRequest]
    ) -> List[RequestDetails]:
        if not requests:
            return []

        assignments = await self.assignment_repo.get_employee_ids_by_request(
            [r.id for r in requests]
        )
        profile_ids = {r.customer_id for r in requests}
        for employee_ids in assignments.values():
            profile_ids.update(employee_ids)
        profiles = await self.profile_repo.get_by_ids(profile_ids)

        details = []
        for request in requests:
            request.assigned_employee_ids = assignments.get(request.id, [])
            details.append(
                RequestDetails(
                    request=request,
                    customer=profiles.get(request.customer_id),
                    employees=[
                        profiles[e] for e in request.assigned_employee_ids if e in profiles
                    ],
                )
            )
        return details
