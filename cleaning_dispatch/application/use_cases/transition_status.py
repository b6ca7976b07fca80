"""Request status transition use case."""

from cleaning_dispatch.application.commands import StatusCommand
from cleaning_dispatch.application.services.request_filters import ensure_can_act_on
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestStoreGateway,
)
from cleaning_dispatch.application.services.status_workflow import (
    StatusWorkflowEngine,
)
from cleaning_dispatch.application.session import SessionContext
from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.exceptions.workflow_error import InvalidTransitionError
from cleaning_dispatch.infrastructure.monitoring.metrics import (
    record_status_transition,
)

logger = get_logger(__name__)


class TransitionStatusUseCase:
    """Use case for every status-only workflow command."""

    def __init__(self, gateway: RequestStoreGateway, workflow: StatusWorkflowEngine):
        self.gateway = gateway
        self.workflow = workflow
        self.logger = logger

    async def execute(
        self, context: SessionContext, command: StatusCommand
    ) -> CleaningRequest:
        request = await self.gateway.get_request(command.request_id)
        ensure_can_act_on(context, request)

        change = self.workflow.plan(request, command.target_status, context.role)

        # A command only ever triggers the transition it is named after
        if change.transition.name != command.transition_name:
            raise InvalidTransitionError(request.status.value, command.target_status.value)

        updated = await self.gateway.update_status(
            request.id, change.target, change.fields
        )

        record_status_transition(
            change.transition.name, context.role.value, change.target.value
        )
        self.logger.info(
            "Request status changed",
            request_id=str(request.id),
            transition=change.transition.name,
            source=change.source.value,
            target=change.target.value,
            actor_id=str(context.profile_id),
        )
        return updated
