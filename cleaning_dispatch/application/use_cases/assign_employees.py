"""Assign employees use case."""

from cleaning_dispatch.application.commands import AssignCommand
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestStoreGateway,
)
from cleaning_dispatch.application.services.status_workflow import (
    StatusWorkflowEngine,
)
from cleaning_dispatch.application.session import SessionContext
from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.exceptions.not_found_error import NotFoundError
from cleaning_dispatch.domain.exceptions.validation_error import InvalidInputError
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole
from cleaning_dispatch.infrastructure.monitoring.metrics import (
    record_assignment,
    record_status_transition,
)

logger = get_logger(__name__)


class AssignEmployeesUseCase:
    """Use case for an admin staffing a pending request."""

    def __init__(self, gateway: RequestStoreGateway, workflow: StatusWorkflowEngine):
        self.gateway = gateway
        self.workflow = workflow
        self.logger = logger

    async def execute(
        self, context: SessionContext, command: AssignCommand
    ) -> CleaningRequest:
        """
        Validate the selection and write it.

        Nothing is written unless the move to assigned is legal for the actor
        and the selection size equals the request's employee_count.
        """
        request = await self.gateway.get_request(command.request_id)

        change = self.workflow.plan(
            request,
            RequestStatus.ASSIGNED,
            context.role,
            assigned_count=len(command.employee_ids),
        )

        profiles = await self.gateway.get_profiles(command.employee_ids)
        for employee_id in command.employee_ids:
            profile = profiles.get(employee_id)
            if profile is None:
                raise NotFoundError("Employee", employee_id)
            if profile.role != UserRole.EMPLOYEE:
                raise InvalidInputError(
                    "employee_ids", str(employee_id), "profiles with the employee role"
                )

        assigned = await self.gateway.assign_employees(
            command.request_id, command.employee_ids
        )

        record_assignment(len(command.employee_ids))
        record_status_transition(
            change.transition.name, context.role.value, assigned.status.value
        )
        self.logger.info(
            "Request staffed",
            request_id=str(assigned.id),
            admin_id=str(context.profile_id),
            employee_count=len(assigned.assigned_employee_ids),
        )
        return assigned
