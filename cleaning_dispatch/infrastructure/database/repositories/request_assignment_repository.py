"""
Request assignment repository implementation.
"""

from collections import defaultdict
from typing import Dict, Iterable, List
from uuid import UUID

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from cleaning_dispatch.application.interfaces.repositories import (
    RequestAssignmentRepositoryInterface,
)
from cleaning_dispatch.infrastructure.database.models.request_assignment import (
    RequestAssignmentModel,
)


class RequestAssignmentRepository(RequestAssignmentRepositoryInterface):
    """Request assignment repository implementation."""

    def __init__(self, session: AsyncSession):
        self.session = session

    async def replace_for_request(
        self, request_id: UUID, employee_ids: List[UUID]
    ) -> List[UUID]:
        """Delete every assignment of the request, then insert the new set."""
        await self.session.execute(
            delete(RequestAssignmentModel).where(
                RequestAssignmentModel.request_id == request_id
            )
        )

        for employee_id in employee_ids:
            self.session.add(
                RequestAssignmentModel(request_id=request_id, employee_id=employee_id)
            )
        await self.session.flush()

        return await self.get_employee_ids(request_id)

    async def get_employee_ids(self, request_id: UUID) -> List[UUID]:
        """Get employee IDs assigned to a request."""
        result = await self.session.execute(
            select(RequestAssignmentModel.employee_id)
            .where(RequestAssignmentModel.request_id == request_id)
            .order_by(RequestAssignmentModel.created_at)
        )
        return list(result.scalars().all())

    async def get_employee_ids_by_request(
        self, request_ids: Iterable[UUID]
    ) -> Dict[UUID, List[UUID]]:
        """Batched lookup of assigned employee IDs for many requests."""
        request_ids = list(request_ids)
        if not request_ids:
            return {}

        result = await self.session.execute(
            select(RequestAssignmentModel.request_id, RequestAssignmentModel.employee_id)
            .where(RequestAssignmentModel.request_id.in_(request_ids))
            .order_by(RequestAssignmentModel.created_at)
        )

        by_request: Dict[UUID, List[UUID]] = defaultdict(list)
        for request_id, employee_id in result.all():
            by_request[request_id].append(employee_id)
        return dict(by_request)
