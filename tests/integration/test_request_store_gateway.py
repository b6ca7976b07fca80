"""
Integration tests for the request store gateway over SQLite.
"""

from datetime import date, datetime, time, timezone
from decimal import Decimal
from uuid import uuid4

import pytest

from cleaning_dispatch.application.services.request_filters import RequestFilter
from cleaning_dispatch.domain.entities.profile import Profile
from cleaning_dispatch.domain.exceptions.not_found_error import NotFoundError
from cleaning_dispatch.domain.exceptions.validation_error import DuplicateRecordError
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole


class TestProfiles:
    @pytest.mark.asyncio
    async def test_register_and_lookup(self, gateway, stored_profiles):
        customer = stored_profiles["customer"]

        loaded = await gateway.get_profile(customer.id)
        assert loaded.email == customer.email
        assert loaded.role == UserRole.CUSTOMER

        assert await gateway.find_profile(uuid4()) is None
        with pytest.raises(NotFoundError):
            await gateway.get_profile(uuid4())

    @pytest.mark.asyncio
    async def test_list_employees_by_name(self, gateway, stored_profiles):
        employees = await gateway.list_employees()
        assert [e.full_name for e in employees] == ["Baris Oz", "Emre Yilmaz", "Selin Kaya"]

    @pytest.mark.asyncio
    async def test_batched_profile_lookup(self, gateway, stored_profiles):
        ids = [e.id for e in stored_profiles["employees"]] + [uuid4()]
        profiles = await gateway.get_profiles(ids)
        assert set(profiles) == set(ids[:3])

    @pytest.mark.asyncio
    async def test_duplicate_email_is_rejected(self, gateway, stored_profiles):
        clash = Profile(
            id=uuid4(),
            email=stored_profiles["customer"].email,
            full_name="Someone Else",
            role=UserRole.CUSTOMER,
        )
        with pytest.raises(DuplicateRecordError):
            await gateway.register_profile(clash)


class TestCreateRequest:
    @pytest.mark.asyncio
    async def test_created_pending_with_price(self, gateway, stored_profiles, create_command):
        customer = stored_profiles["customer"]

        request = await gateway.create_request(
            customer.id, create_command(home_size="large", employee_count=2)
        )

        loaded = await gateway.get_request(request.id)
        assert loaded.status == RequestStatus.PENDING
        assert loaded.price == Decimal("1800.00")
        assert loaded.customer_id == customer.id
        assert loaded.address == "Sample street 1, Moda, Kadikoy/Istanbul"
        assert loaded.assigned_employee_ids == []

    @pytest.mark.asyncio
    async def test_unknown_request(self, gateway):
        with pytest.raises(NotFoundError):
            await gateway.get_request(uuid4())


class TestAssignEmployees:
    @pytest.mark.asyncio
    async def test_assign_sets_status(self, gateway, stored_profiles, create_command):
        customer = stored_profiles["customer"]
        employees = stored_profiles["employees"]
        request = await gateway.create_request(customer.id, create_command(employee_count=2))

        assigned = await gateway.assign_employees(request.id, [employees[0].id, employees[1].id])

        assert assigned.status == RequestStatus.ASSIGNED
        assert set(assigned.assigned_employee_ids) == {employees[0].id, employees[1].id}

    @pytest.mark.asyncio
    async def test_reassign_replaces_set(self, gateway, stored_profiles, create_command):
        customer = stored_profiles["customer"]
        employees = stored_profiles["employees"]
        request = await gateway.create_request(customer.id, create_command())

        await gateway.assign_employees(request.id, [employees[0].id])
        await gateway.assign_employees(request.id, [employees[2].id])

        loaded = await gateway.get_request(request.id)
        assert loaded.assigned_employee_ids == [employees[2].id]

    @pytest.mark.asyncio
    async def test_empty_set_keeps_status(self, gateway, stored_profiles, create_command):
        request = await gateway.create_request(
            stored_profiles["customer"].id, create_command()
        )

        result = await gateway.assign_employees(request.id, [])

        assert result.status == RequestStatus.PENDING
        assert result.assigned_employee_ids == []

    @pytest.mark.asyncio
    async def test_failed_assignment_rolls_back(
        self, gateway, stored_profiles, create_command
    ):
        customer = stored_profiles["customer"]
        employees = stored_profiles["employees"]
        request = await gateway.create_request(customer.id, create_command(employee_count=2))

        # The duplicate pair violates the unique constraint after the delete ran
        with pytest.raises(DuplicateRecordError):
            await gateway.assign_employees(request.id, [employees[0].id, employees[0].id])

        loaded = await gateway.get_request(request.id)
        assert loaded.status == RequestStatus.PENDING
        assert loaded.assigned_employee_ids == []

    @pytest.mark.asyncio
    async def test_failed_reassignment_keeps_previous_set(
        self, gateway, stored_profiles, create_command
    ):
        customer = stored_profiles["customer"]
        employees = stored_profiles["employees"]
        request = await gateway.create_request(customer.id, create_command())
        await gateway.assign_employees(request.id, [employees[0].id])

        with pytest.raises(DuplicateRecordError):
            await gateway.assign_employees(request.id, [employees[1].id, employees[1].id])

        loaded = await gateway.get_request(request.id)
        assert loaded.status == RequestStatus.ASSIGNED
        assert loaded.assigned_employee_ids == [employees[0].id]

    @pytest.mark.asyncio
    async def test_unknown_request(self, gateway, stored_profiles):
        with pytest.raises(NotFoundError):
            await gateway.assign_employees(uuid4(), [stored_profiles["employees"][0].id])


class TestUpdateStatus:
    @pytest.mark.asyncio
    async def test_writes_status_and_fields(self, gateway, stored_profiles, create_command):
        request = await gateway.create_request(
            stored_profiles["customer"].id, create_command()
        )
        completed_at = datetime(2026, 11, 2, 14, 0, tzinfo=timezone.utc)

        updated = await gateway.update_status(
            request.id, RequestStatus.AWAITING_CONFIRMATION, {"completed_at": completed_at}
        )

        assert updated.status == RequestStatus.AWAITING_CONFIRMATION
        assert updated.completed_at.replace(tzinfo=None) == completed_at.replace(tzinfo=None)

    @pytest.mark.asyncio
    async def test_unknown_request(self, gateway):
        with pytest.raises(NotFoundError):
            await gateway.update_status(uuid4(), RequestStatus.CANCELLED)


class TestListRequests:
    @pytest.mark.asyncio
    async def test_employee_scope_ordered_by_service_date(
        self, gateway, stored_profiles, create_command
    ):
        customer = stored_profiles["customer"]
        employee = stored_profiles["employees"][0]
        later = await gateway.create_request(
            customer.id, create_command(service_date=date(2026, 12, 1))
        )
        earlier = await gateway.create_request(
            customer.id, create_command(service_date=date(2026, 11, 5), service_time=time(9, 0))
        )
        unassigned = await gateway.create_request(customer.id, create_command())
        for request in (later, earlier):
            await gateway.assign_employees(request.id, [employee.id])

        details = await gateway.list_requests(RequestFilter.by_employee(employee.id))

        assert [d.request.id for d in details] == [earlier.id, later.id]
        assert unassigned.id not in [d.request.id for d in details]
        assert details[0].customer.id == customer.id
        assert [e.id for e in details[0].employees] == [employee.id]

    @pytest.mark.asyncio
    async def test_customer_scope_and_statuses(
        self, gateway, stored_profiles, create_command
    ):
        customer = stored_profiles["customer"]
        other = stored_profiles["other_customer"]
        mine = await gateway.create_request(customer.id, create_command())
        cancelled = await gateway.create_request(customer.id, create_command())
        await gateway.update_status(cancelled.id, RequestStatus.CANCELLED)
        await gateway.create_request(other.id, create_command())

        all_mine = await gateway.list_requests(RequestFilter.by_customer(customer.id))
        pending_mine = await gateway.list_requests(
            RequestFilter.by_customer(customer.id, [RequestStatus.PENDING])
        )

        assert {d.request.id for d in all_mine} == {mine.id, cancelled.id}
        assert [d.request.id for d in pending_mine] == [mine.id]

    @pytest.mark.asyncio
    async def test_all_scope(self, gateway, stored_profiles, create_command):
        await gateway.create_request(stored_profiles["customer"].id, create_command())
        await gateway.create_request(stored_profiles["other_customer"].id, create_command())

        details = await gateway.list_requests(RequestFilter.all())

        assert len(details) == 2
        assert all(d.customer is not None for d in details)

    @pytest.mark.asyncio
    async def test_empty(self, gateway):
        assert await gateway.list_requests(RequestFilter.all()) == []
