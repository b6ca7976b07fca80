"""
Employee dashboard.
"""

from uuid import UUID

from cleaning_dispatch.application.commands import MarkAwaitingConfirmationCommand
from cleaning_dispatch.application.dashboards.base import RoleDashboard
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class EmployeeDashboard(RoleDashboard):
    """Assigned work, ordered by service date."""

    role = UserRole.EMPLOYEE

    async def mark_completed(self, request_id: UUID) -> CleaningRequest:
        """Report the job done; the customer then confirms or rejects it."""
        return await self._transition.execute(
            self.context, MarkAwaitingConfirmationCommand(request_id)
        )
