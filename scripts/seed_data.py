#!/usr/bin/env python3
"""
Seed database with test data for development.
"""

import asyncio
from datetime import date, time, timedelta
from uuid import UUID

from cleaning_dispatch.application.commands import CreateRequestCommand
from cleaning_dispatch.application.services.pricing_calculator import PricingCalculator
from cleaning_dispatch.application.services.request_store_gateway import (
    RequestStoreGateway,
)
from cleaning_dispatch.config.database import (
    close_database_connections,
    get_async_session_factory,
)
from cleaning_dispatch.config.logging import configure_logging, get_logger
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.value_objects.home_size import HomeSize
from cleaning_dispatch.domain.value_objects.user_role import UserRole
from cleaning_dispatch.infrastructure.database.repositories import (
    CleaningRequestRepository,
    ProfileRepository,
    RequestAssignmentRepository,
    TransactionService,
)

logger = get_logger(__name__)

PROFILES = [
    Profile(
        id=UUID("00000000-0000-4000-8000-000000000001"),
        email="admin@example.com",
        full_name="Ayse Admin",
        role=UserRole.ADMIN,
    ),
    Profile(
        id=UUID("00000000-0000-4000-8000-000000000011"),
        email="emre@example.com",
        full_name="Emre Yilmaz",
        role=UserRole.EMPLOYEE,
        phone="+905550000011",
    ),
    Profile(
        id=UUID("00000000-0000-4000-8000-000000000012"),
        email="selin@example.com",
        full_name="Selin Kaya",
        role=UserRole.EMPLOYEE,
        phone="+905550000012",
    ),
    Profile(
        id=UUID("00000000-0000-4000-8000-000000000021"),
        email="customer@example.com",
        full_name="Can Demir",
        role=UserRole.CUSTOMER,
    ),
]


async def seed_database() -> None:
    """Seed database with test data."""
    session_factory = get_async_session_factory()

    async with session_factory() as session:
        gateway = RequestStoreGateway(
            CleaningRequestRepository(session),
            RequestAssignmentRepository(session),
            ProfileRepository(session),
            TransactionService(session),
            PricingCalculator(),
        )

        if await gateway.find_profile(PROFILES[0].id):
            logger.info("Database already has data, skipping seed")
            return

        for profile in PROFILES:
            await gateway.register_profile(profile)

        customer = PROFILES[-1]
        for offset, (home_size, employee_count) in enumerate(
            [(HomeSize.SMALL, 1), (HomeSize.MEDIUM, 2), (HomeSize.LARGE, 3)], start=1
        ):
            await gateway.create_request(
                customer.id,
                CreateRequestCommand(
                    city="Istanbul",
                    district="Kadikoy",
                    neighborhood="Moda",
                    address_detail=f"Sample street {offset}",
                    service_date=date.today() + timedelta(days=offset),
                    service_time=time(10, 0),
                    home_size=home_size,
                    employee_count=employee_count,
                ),
            )

    logger.info("Database seeded", profiles=len(PROFILES), requests=3)


async def main() -> None:
    configure_logging()
    try:
        await seed_database()
    finally:
        await close_database_connections()


if __name__ == "__main__":
    asyncio.run(main())
