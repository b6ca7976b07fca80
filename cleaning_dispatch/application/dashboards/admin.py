"""
Admin dashboard.
"""

from typing import Iterable, List
from uuid import UUID

from cleaning_dispatch.application.commands import (
    AssignCommand,
    CancelRequestCommand,
    ForceCompleteCommand,
)
from cleaning_dispatch.application.dashboards.base import RoleDashboard
from cleaning_dispatch.application.use_cases.assign_employees import (
    AssignEmployeesUseCase,
)
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class AdminDashboard(RoleDashboard):
    """Every request, the employee roster, staffing and closing."""

    role = UserRole.ADMIN

    async def list_employees(self) -> List[Profile]:
        return await self.gateway.list_employees()

    async def assign(
        self, request_id: UUID, employee_ids: Iterable[UUID]
    ) -> CleaningRequest:
        return await AssignEmployeesUseCase(self.gateway, self.workflow).execute(
            self.context, AssignCommand(request_id, tuple(employee_ids))
        )

    async def force_complete(self, request_id: UUID) -> CleaningRequest:
        """Close an assigned request without the confirmation round trip."""
        return await self._transition.execute(
            self.context, ForceCompleteCommand(request_id)
        )

    async def cancel(self, request_id: UUID) -> CleaningRequest:
        return await self._transition.execute(
            self.context, CancelRequestCommand(request_id)
        )
