"""Cleaning request repository implementation."""

from datetime import datetime, timezone
from typing import Any, Dict, Iterable, List, Optional
from uuid import UUID

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from cleaning_dispatch.application.interfaces.repositories import (
    CleaningRequestRepositoryInterface,
)
from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.exceptions.not_found_error import NotFoundError
from cleaning_dispatch.domain.value_objects.location import Location
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.infrastructure.database.models.cleaning_request import (
    CleaningRequestModel,
)
from cleaning_dispatch.infrastructure.database.models.request_assignment import (
    RequestAssignmentModel,
)

logger = get_logger(__name__)

# Columns a status change may touch besides status itself
STATUS_FIELDS = ("completed_at", "confirmed_at")


class CleaningRequestRepository(CleaningRequestRepositoryInterface):
    """Cleaning request repository implementation."""

    def __init__(self, db: AsyncSession):
        self.db = db

    async def create(self, request: CleaningRequest) -> CleaningRequest:
        """Create a new cleaning request."""
        model = CleaningRequestModel(
            id=request.id,
            customer_id=request.customer_id,
            city=request.location.city,
            district=request.location.district,
            neighborhood=request.location.neighborhood,
            address_detail=request.location.address_detail,
            address=request.address,
            service_date=request.service_date,
            service_time=request.service_time,
            home_size=request.home_size.value,
            employee_count=request.employee_count,
            special_notes=request.special_notes,
            status=request.status.value,
            price=request.price,
            completed_at=request.completed_at,
            confirmed_at=request.confirmed_at,
            created_at=request.created_at,
            updated_at=request.updated_at,
        )

        self.db.add(model)
        # Flush only, the caller owns the transaction
        await self.db.flush()
        await self.db.refresh(model)

        return self._model_to_entity(model)

    async def get_by_id(self, request_id: UUID) -> Optional[CleaningRequest]:
        """Get cleaning request by ID."""
        model = await self._get_model(request_id)
        return self._model_to_entity(model) if model else None

    async def find_all(
        self, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> List[CleaningRequest]:
        """Find all requests, newest first."""
        stmt = select(CleaningRequestModel)
        stmt = self._with_statuses(stmt, statuses)
        stmt = stmt.order_by(CleaningRequestModel.created_at.desc())
        return await self._fetch(stmt)

    async def find_by_customer(
        self, customer_id: UUID, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> List[CleaningRequest]:
        """Find requests owned by a customer, newest first."""
        stmt = select(CleaningRequestModel).where(
            CleaningRequestModel.customer_id == customer_id
        )
        stmt = self._with_statuses(stmt, statuses)
        stmt = stmt.order_by(CleaningRequestModel.created_at.desc())
        return await self._fetch(stmt)

    async def find_by_employee(
        self, employee_id: UUID, statuses: Optional[Iterable[RequestStatus]] = None
    ) -> List[CleaningRequest]:
        """Find requests assigned to an employee, earliest service date first."""
        stmt = (
            select(CleaningRequestModel)
            .join(
                RequestAssignmentModel,
                RequestAssignmentModel.request_id == CleaningRequestModel.id,
            )
            .where(RequestAssignmentModel.employee_id == employee_id)
        )
        stmt = self._with_statuses(stmt, statuses)
        stmt = stmt.order_by(
            CleaningRequestModel.service_date.asc(),
            CleaningRequestModel.service_time.asc(),
        )
        return await self._fetch(stmt)

    async def update_status(
        self,
        request_id: UUID,
        status: RequestStatus,
        fields: Optional[Dict[str, Any]] = None,
    ) -> CleaningRequest:
        """Persist a status change with its accompanying field changes."""
        model = await self._get_model(request_id)
        if not model:
            raise NotFoundError("Cleaning request", request_id)

        fields = fields or {}
        unknown = set(fields) - set(STATUS_FIELDS)
        if unknown:
            raise ValueError(f"Fields not writable on status change: {sorted(unknown)}")

        model.status = RequestStatus(status).value
        for name, value in fields.items():
            setattr(model, name, value)
        model.updated_at = datetime.now(timezone.utc)

        await self.db.flush()
        await self.db.refresh(model)

        logger.debug(
            "Cleaning request status updated",
            request_id=str(request_id),
            status=model.status,
            fields=sorted(fields),
        )
        return self._model_to_entity(model)

    async def _get_model(self, request_id: UUID) -> Optional[CleaningRequestModel]:
        stmt = select(CleaningRequestModel).where(CleaningRequestModel.id == request_id)
        result = await self.db.execute(stmt)
        return result.scalar_one_or_none()

    async def _fetch(self, stmt) -> List[CleaningRequest]:
        result = await self.db.execute(stmt)
        return [self._model_to_entity(model) for model in result.scalars().all()]

    @staticmethod
    def _with_statuses(stmt, statuses: Optional[Iterable[RequestStatus]]):
        if statuses is None:
            return stmt
        values = [RequestStatus(s).value for s in statuses]
        return stmt.where(CleaningRequestModel.status.in_(values))

    def _model_to_entity(self, model: CleaningRequestModel) -> CleaningRequest:
        """Convert SQLAlchemy model to domain entity."""
        location = Location(
            city=model.city,
            district=model.district,
            neighborhood=model.neighborhood,
            address_detail=model.address_detail,
        )

        return CleaningRequest(
            id=model.id,
            customer_id=model.customer_id,
            location=location,
            service_date=model.service_date,
            service_time=model.service_time,
            home_size=model.home_size,
            employee_count=model.employee_count,
            special_notes=model.special_notes,
            status=model.status,
            price=model.price,
            completed_at=model.completed_at,
            confirmed_at=model.confirmed_at,
            created_at=model.created_at,
            updated_at=model.updated_at,
        )
