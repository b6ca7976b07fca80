"""
Customer dashboard.
"""

from uuid import UUID

from cleaning_dispatch.application.commands import (
    CancelRequestCommand,
    ConfirmCompletionCommand,
    CreateRequestCommand,
    RejectCompletionCommand,
)
from cleaning_dispatch.application.dashboards.base import RoleDashboard
from cleaning_dispatch.application.use_cases.create_request import (
    CreateCleaningRequestUseCase,
)
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class CustomerDashboard(RoleDashboard):
    """Own requests: book, confirm or reject a reported completion, cancel."""

    role = UserRole.CUSTOMER

    async def create(self, command: CreateRequestCommand) -> CleaningRequest:
        return await CreateCleaningRequestUseCase(self.gateway).execute(
            self.context, command
        )

    async def confirm(self, request_id: UUID) -> CleaningRequest:
        return await self._transition.execute(
            self.context, ConfirmCompletionCommand(request_id)
        )

    async def reject(self, request_id: UUID) -> CleaningRequest:
        return await self._transition.execute(
            self.context, RejectCompletionCommand(request_id)
        )

    async def cancel(self, request_id: UUID) -> CleaningRequest:
        return await self._transition.execute(
            self.context, CancelRequestCommand(request_id)
        )
