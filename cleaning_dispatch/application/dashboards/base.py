"""
Base role dashboard.
"""

from typing import ClassVar, List, Optional
from uuid import UUID

from cleaning_dispatch.application.services.request_filters import RequestSummary
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestDetails,
    RequestStoreGateway,
)
from cleaning_dispatch.application.services.status_workflow import (
    StatusWorkflowEngine,
)
from cleaning_dispatch.application.session import SessionContext
from cleaning_dispatch.application.use_cases.list_requests import ListRequestsUseCase
from cleaning_dispatch.application.use_cases.transition_status import (
    TransitionStatusUseCase,
)
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.exceptions.workflow_error import PermissionDeniedError
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class RoleDashboard:
    """
    Façade over the use cases one role may run.

    A dashboard is bound to a single SessionContext; constructing one for a
    profile of another role raises PermissionDeniedError.
    """

    role: ClassVar[UserRole]

    def __init__(
        self,
        context: SessionContext,
        gateway: RequestStoreGateway,
        workflow: StatusWorkflowEngine,
    ):
        if context.role != self.role:
            raise PermissionDeniedError(
                context.role.value, f"open the {self.role.value} dashboard"
            )
        self.context = context
        self.gateway = gateway
        self.workflow = workflow
        self._list_requests = ListRequestsUseCase(gateway)
        self._transition = TransitionStatusUseCase(gateway, workflow)

    async def load(self, status_filter: Optional[str] = None) -> List[RequestDetails]:
        """Requests visible to this role, optionally narrowed to one tab."""
        return await self._list_requests.execute(self.context, status_filter)

    async def summary(self) -> RequestSummary:
        return await self._list_requests.summary(self.context)

    async def get(self, request_id: UUID) -> CleaningRequest:
        return await self.gateway.get_request(request_id)
