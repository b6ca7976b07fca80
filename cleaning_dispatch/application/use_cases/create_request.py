"""Create cleaning request use case."""

from cleaning_dispatch.application.commands import CreateRequestCommand
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestStoreGateway,
)
from cleaning_dispatch.application.session import SessionContext
from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.exceptions.workflow_error import PermissionDeniedError
from cleaning_dispatch.domain.value_objects.user_role import UserRole
from cleaning_dispatch.infrastructure.monitoring.metrics import record_request_created

logger = get_logger(__name__)


class CreateCleaningRequestUseCase:
    """Use case for a customer booking a cleaning."""

    def __init__(self, gateway: RequestStoreGateway):
        self.gateway = gateway
        self.logger = logger

    async def execute(
        self, context: SessionContext, command: CreateRequestCommand
    ) -> CleaningRequest:
        if context.role != UserRole.CUSTOMER:
            raise PermissionDeniedError(context.role.value, "create cleaning requests")

        request = await self.gateway.create_request(context.profile_id, command)
        record_request_created(request.home_size.value, request.employee_count)
        return request
