"""
Pytest configuration and fixtures.
"""

from datetime import date, time
from typing import AsyncGenerator
from unittest.mock import AsyncMock
from uuid import uuid4

import pytest
import pytest_asyncio
from sqlalchemy.ext.asyncio import AsyncSession, async_sessionmaker, create_async_engine
from sqlalchemy.pool import StaticPool

from cleaning_dispatch.application.commands import CreateRequestCommand
from cleaning_dispatch.application.services.pricing_calculator import PricingCalculator
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestStoreGateway,
)
from cleaning_dispatch.application.services.status_workflow import (
    StatusWorkflowEngine,
    WorkflowPolicy,
)
from cleaning_dispatch.application.session import SessionContext
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.value_objects.home_size import HomeSize
from cleaning_dispatch.domain.value_objects.location import Location
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole
from cleaning_dispatch.infrastructure.database.models import Base
from cleaning_dispatch.infrastructure.database.repositories import (
    CleaningRequestRepository,
    ProfileRepository,
    RequestAssignmentRepository,
    TransactionService,
)

# Test database URL
TEST_DATABASE_URL = "sqlite+aiosqlite:///:memory:"


@pytest_asyncio.fixture
async def test_engine():
    """Create a fresh in-memory database per test."""
    engine = create_async_engine(
        TEST_DATABASE_URL,
        echo=False,
        poolclass=StaticPool,
        connect_args={"check_same_thread": False},
    )

    async with engine.begin() as conn:
        await conn.run_sync(Base.metadata.create_all)

    yield engine

    await engine.dispose()


@pytest_asyncio.fixture
async def db_session(test_engine) -> AsyncGenerator[AsyncSession, None]:
    """Create test database session."""
    async_session_factory = async_sessionmaker(
        test_engine, class_=AsyncSession, expire_on_commit=False
    )

    async with async_session_factory() as session:
        yield session
        await session.rollback()


@pytest.fixture
def gateway(db_session) -> RequestStoreGateway:
    """Request store gateway over the test database."""
    return RequestStoreGateway(
        CleaningRequestRepository(db_session),
        RequestAssignmentRepository(db_session),
        ProfileRepository(db_session),
        TransactionService(db_session),
        PricingCalculator(),
    )


@pytest.fixture
def workflow() -> StatusWorkflowEngine:
    return StatusWorkflowEngine(WorkflowPolicy.SHORTCUT)


@pytest.fixture
def strict_workflow() -> StatusWorkflowEngine:
    return StatusWorkflowEngine(WorkflowPolicy.STRICT)


def make_profile(role: UserRole, name: str) -> Profile:
    slug = name.lower().replace(" ", ".")
    return Profile(id=uuid4(), email=f"{slug}@example.com", full_name=name, role=role)


@pytest.fixture
def admin_profile() -> Profile:
    return make_profile(UserRole.ADMIN, "Ayse Admin")


@pytest.fixture
def customer_profile() -> Profile:
    return make_profile(UserRole.CUSTOMER, "Can Demir")


@pytest.fixture
def other_customer_profile() -> Profile:
    return make_profile(UserRole.CUSTOMER, "Deniz Ak")


@pytest.fixture
def employee_profiles() -> list:
    return [
        make_profile(UserRole.EMPLOYEE, "Emre Yilmaz"),
        make_profile(UserRole.EMPLOYEE, "Selin Kaya"),
        make_profile(UserRole.EMPLOYEE, "Baris Oz"),
    ]


@pytest_asyncio.fixture
async def stored_profiles(
    gateway, admin_profile, customer_profile, other_customer_profile, employee_profiles
):
    """Register every sample profile in the test database."""
    for profile in [
        admin_profile,
        customer_profile,
        other_customer_profile,
        *employee_profiles,
    ]:
        await gateway.register_profile(profile)
    return {
        "admin": admin_profile,
        "customer": customer_profile,
        "other_customer": other_customer_profile,
        "employees": employee_profiles,
    }


@pytest.fixture
def admin_context(admin_profile) -> SessionContext:
    return SessionContext(profile=admin_profile)


@pytest.fixture
def customer_context(customer_profile) -> SessionContext:
    return SessionContext(profile=customer_profile)


@pytest.fixture
def employee_context(employee_profiles) -> SessionContext:
    return SessionContext(profile=employee_profiles[0])


@pytest.fixture
def sample_location() -> Location:
    return Location(
        city="Istanbul",
        district="Kadikoy",
        neighborhood="Moda",
        address_detail="Sample street 1",
    )


@pytest.fixture
def make_request(sample_location, customer_profile):
    """Factory for in-memory cleaning requests."""

    def _make(**overrides) -> CleaningRequest:
        data = dict(
            customer_id=customer_profile.id,
            location=sample_location,
            service_date=date(2026, 11, 2),
            service_time=time(10, 0),
            home_size=HomeSize.MEDIUM,
            employee_count=1,
            status=RequestStatus.PENDING,
        )
        data.update(overrides)
        return CleaningRequest(**data)

    return _make


@pytest.fixture
def create_command():
    """Factory for booking commands."""

    def _make(**overrides) -> CreateRequestCommand:
        data = dict(
            city="Istanbul",
            district="Kadikoy",
            neighborhood="Moda",
            address_detail="Sample street 1",
            service_date=date(2026, 11, 2),
            service_time=time(10, 0),
            home_size=HomeSize.MEDIUM,
            employee_count=1,
        )
        data.update(overrides)
        return CreateRequestCommand(**data)

    return _make


@pytest.fixture
def mock_gateway():
    """Mock request store gateway."""
    return AsyncMock(spec=RequestStoreGateway)
