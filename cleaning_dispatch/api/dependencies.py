"""
FastAPI dependency injection container.
"""

from typing import Annotated, AsyncGenerator, Optional

from fastapi import Depends, Request
from sqlalchemy.ext.asyncio import AsyncSession

from cleaning_dispatch.application.dashboards import (
    AdminDashboard,
    CustomerDashboard,
    EmployeeDashboard,
)
from cleaning_dispatch.application.services.pricing_calculator import PricingCalculator
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestStoreGateway,
)
from cleaning_dispatch.application.services.status_workflow import (
    StatusWorkflowEngine,
    WorkflowPolicy,
)
from cleaning_dispatch.application.session import SessionContext, SessionManager
from cleaning_dispatch.config.database import get_db_session
from cleaning_dispatch.config.logging import bind_request_context, get_logger
from cleaning_dispatch.config.settings import settings
from cleaning_dispatch.infrastructure.database.repositories.cleaning_request_repository import (
    CleaningRequestRepository,
)
from cleaning_dispatch.infrastructure.database.repositories.profile_repository import (
    ProfileRepository,
)
from cleaning_dispatch.infrastructure.database.repositories.request_assignment_repository import (
    RequestAssignmentRepository,
)
from cleaning_dispatch.infrastructure.database.repositories.transaction_repository import (
    TransactionService,
)
from cleaning_dispatch.infrastructure.identity.profile_identity_provider import (
    ProfileIdentityProvider,
)

logger = get_logger(__name__)


# Database Dependencies
async def get_cleaning_request_repository(
    db: AsyncSession = Depends(get_db_session),
) -> CleaningRequestRepository:
    """Get cleaning request repository instance."""
    return CleaningRequestRepository(db)


async def get_request_assignment_repository(
    db: AsyncSession = Depends(get_db_session),
) -> RequestAssignmentRepository:
    """Get request assignment repository instance."""
    return RequestAssignmentRepository(db)


async def get_profile_repository(
    db: AsyncSession = Depends(get_db_session),
) -> ProfileRepository:
    """Get profile repository instance."""
    return ProfileRepository(db)


async def get_transaction_service(
    db: AsyncSession = Depends(get_db_session),
) -> TransactionService:
    """Get transaction service instance."""
    return TransactionService(db)


# Service Dependencies
async def get_pricing_calculator() -> PricingCalculator:
    return PricingCalculator(enabled=settings.PRICING_ENABLED)


async def get_workflow_engine() -> StatusWorkflowEngine:
    return StatusWorkflowEngine(WorkflowPolicy(settings.WORKFLOW_POLICY))


async def get_request_store_gateway(
    request_repo: CleaningRequestRepository = Depends(get_cleaning_request_repository),
    assignment_repo: RequestAssignmentRepository = Depends(
        get_request_assignment_repository
    ),
    profile_repo: ProfileRepository = Depends(get_profile_repository),
    transaction_service: TransactionService = Depends(get_transaction_service),
    pricing: PricingCalculator = Depends(get_pricing_calculator),
) -> RequestStoreGateway:
    """Get request store gateway instance."""
    return RequestStoreGateway(
        request_repo, assignment_repo, profile_repo, transaction_service, pricing
    )


async def get_identity_provider(
    profile_repo: ProfileRepository = Depends(get_profile_repository),
    transaction_service: TransactionService = Depends(get_transaction_service),
) -> ProfileIdentityProvider:
    return ProfileIdentityProvider(profile_repo, transaction_service)


# Session Dependencies
async def get_session_context(
    request: Request,
    identity: ProfileIdentityProvider = Depends(get_identity_provider),
) -> AsyncGenerator[SessionContext, None]:
    """Sign the forwarded profile in for the duration of one HTTP request."""
    credential: Optional[str] = request.headers.get(settings.IDENTITY_HEADER)
    profile = await identity.resolve(credential)

    manager = SessionManager()
    context = manager.sign_in(profile)
    bind_request_context(profile_id=context.profile_id, role=context.role.value)
    try:
        yield context
    finally:
        manager.sign_out()


GatewayDep = Annotated[RequestStoreGateway, Depends(get_request_store_gateway)]
WorkflowEngineDep = Annotated[StatusWorkflowEngine, Depends(get_workflow_engine)]
SessionContextDep = Annotated[SessionContext, Depends(get_session_context)]


# Dashboard Dependencies
async def get_customer_dashboard(
    context: SessionContextDep, gateway: GatewayDep, workflow: WorkflowEngineDep
) -> CustomerDashboard:
    return CustomerDashboard(context, gateway, workflow)


async def get_employee_dashboard(
    context: SessionContextDep, gateway: GatewayDep, workflow: WorkflowEngineDep
) -> EmployeeDashboard:
    return EmployeeDashboard(context, gateway, workflow)


async def get_admin_dashboard(
    context: SessionContextDep, gateway: GatewayDep, workflow: WorkflowEngineDep
) -> AdminDashboard:
    return AdminDashboard(context, gateway, workflow)


# Type aliases for cleaner dependency injection
CustomerDashboardDep = Annotated[CustomerDashboard, Depends(get_customer_dashboard)]
EmployeeDashboardDep = Annotated[EmployeeDashboard, Depends(get_employee_dashboard)]
AdminDashboardDep = Annotated[AdminDashboard, Depends(get_admin_dashboard)]
