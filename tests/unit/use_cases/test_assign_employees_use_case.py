"""
Unit tests for AssignEmployeesUseCase.
"""

import dataclasses
from uuid import uuid4

import pytest

from cleaning_dispatch.application.commands import AssignCommand
from cleaning_dispatch.application.use_cases.assign_employees import (
    AssignEmployeesUseCase,
)
from cleaning_dispatch.domain.exceptions.not_found_error import NotFoundError
from cleaning_dispatch.domain.exceptions.validation_error import (
    AssignmentCountMismatchError,
    InvalidInputError,
)
from cleaning_dispatch.domain.exceptions.workflow_error import (
    InvalidTransitionError,
    PermissionDeniedError,
)
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus


class TestAssignEmployeesUseCase:
    """Test cases for AssignEmployeesUseCase."""

    @pytest.fixture
    def use_case(self, mock_gateway, workflow):
        return AssignEmployeesUseCase(mock_gateway, workflow)

    @pytest.fixture
    def pending_request(self, make_request):
        return make_request(employee_count=2)

    @pytest.mark.asyncio
    async def test_assigns_matching_selection(
        self, use_case, mock_gateway, admin_context, pending_request, employee_profiles
    ):
        selected = employee_profiles[:2]
        ids = [e.id for e in selected]
        mock_gateway.get_request.return_value = pending_request
        mock_gateway.get_profiles.return_value = {e.id: e for e in selected}
        mock_gateway.assign_employees.return_value = dataclasses.replace(
            pending_request, status=RequestStatus.ASSIGNED, assigned_employee_ids=ids
        )

        result = await use_case.execute(admin_context, AssignCommand(pending_request.id, ids))

        assert result.status == RequestStatus.ASSIGNED
        assert result.assigned_employee_ids == ids
        mock_gateway.assign_employees.assert_awaited_once_with(
            pending_request.id, tuple(ids)
        )

    @pytest.mark.asyncio
    async def test_count_mismatch_writes_nothing(
        self, use_case, mock_gateway, admin_context, pending_request, employee_profiles
    ):
        mock_gateway.get_request.return_value = pending_request

        with pytest.raises(AssignmentCountMismatchError):
            await use_case.execute(
                admin_context, AssignCommand(pending_request.id, [employee_profiles[0].id])
            )

        mock_gateway.assign_employees.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_non_employee_rejected(
        self,
        use_case,
        mock_gateway,
        admin_context,
        pending_request,
        employee_profiles,
        customer_profile,
    ):
        ids = [employee_profiles[0].id, customer_profile.id]
        mock_gateway.get_request.return_value = pending_request
        mock_gateway.get_profiles.return_value = {
            employee_profiles[0].id: employee_profiles[0],
            customer_profile.id: customer_profile,
        }

        with pytest.raises(InvalidInputError):
            await use_case.execute(admin_context, AssignCommand(pending_request.id, ids))

        mock_gateway.assign_employees.assert_not_awaited()

    @pytest.mark.asyncio
    async def test_unknown_employee(
        self, use_case, mock_gateway, admin_context, pending_request, employee_profiles
    ):
        ids = [employee_profiles[0].id, uuid4()]
        mock_gateway.get_request.return_value = pending_request
        mock_gateway.get_profiles.return_value = {employee_profiles[0].id: employee_profiles[0]}

        with pytest.raises(NotFoundError):
            await use_case.execute(admin_context, AssignCommand(pending_request.id, ids))

    @pytest.mark.asyncio
    async def test_only_admin_assigns(
        self, use_case, mock_gateway, customer_context, pending_request, employee_profiles
    ):
        mock_gateway.get_request.return_value = pending_request

        with pytest.raises(PermissionDeniedError):
            await use_case.execute(
                customer_context,
                AssignCommand(pending_request.id, [e.id for e in employee_profiles[:2]]),
            )

    @pytest.mark.asyncio
    async def test_only_pending_requests(
        self, use_case, mock_gateway, admin_context, make_request, employee_profiles
    ):
        mock_gateway.get_request.return_value = make_request(status=RequestStatus.ASSIGNED)

        with pytest.raises(InvalidTransitionError):
            await use_case.execute(
                admin_context, AssignCommand(uuid4(), [employee_profiles[0].id])
            )

    @pytest.mark.asyncio
    async def test_unknown_request(self, use_case, mock_gateway, admin_context):
        request_id = uuid4()
        mock_gateway.get_request.side_effect = NotFoundError("Cleaning request", request_id)

        with pytest.raises(NotFoundError):
            await use_case.execute(admin_context, AssignCommand(request_id, [uuid4()]))
