"""
Unit tests for the status workflow engine.
"""

from datetime import datetime, timezone
from uuid import uuid4

import pytest

from cleaning_dispatch.application.services.status_workflow import (
    ASSIGN,
    CUSTOMER_CANCEL,
    FORCE_COMPLETE,
    StatusWorkflowEngine,
    WorkflowPolicy,
)
from cleaning_dispatch.domain.exceptions.validation_error import (
    AssignmentCountMismatchError,
    InvalidInputError,
)
from cleaning_dispatch.domain.exceptions.workflow_error import (
    InvalidTransitionError,
    PermissionDeniedError,
)
from cleaning_dispatch.domain.value_objects.request_status import RequestStatus
from cleaning_dispatch.domain.value_objects.user_role import UserRole

NOW = datetime(2026, 11, 2, 15, 30, tzinfo=timezone.utc)


class TestValidate:
    @pytest.mark.parametrize(
        "current,target,actor",
        [
            (RequestStatus.PENDING, RequestStatus.ASSIGNED, UserRole.ADMIN),
            (RequestStatus.ASSIGNED, RequestStatus.COMPLETED, UserRole.ADMIN),
            (RequestStatus.ASSIGNED, RequestStatus.AWAITING_CONFIRMATION, UserRole.EMPLOYEE),
            (RequestStatus.IN_PROGRESS, RequestStatus.AWAITING_CONFIRMATION, UserRole.EMPLOYEE),
            (RequestStatus.AWAITING_CONFIRMATION, RequestStatus.COMPLETED, UserRole.CUSTOMER),
            (RequestStatus.AWAITING_CONFIRMATION, RequestStatus.ASSIGNED, UserRole.CUSTOMER),
            (RequestStatus.PENDING, RequestStatus.CANCELLED, UserRole.ADMIN),
            (RequestStatus.ASSIGNED, RequestStatus.CANCELLED, UserRole.ADMIN),
            (RequestStatus.PENDING, RequestStatus.CANCELLED, UserRole.CUSTOMER),
        ],
    )
    def test_allowed_moves(self, workflow, current, target, actor):
        transition = workflow.validate(current, target, actor)
        assert transition.target == target
        assert transition.actor == actor

    @pytest.mark.parametrize(
        "current,target",
        [
            (RequestStatus.PENDING, RequestStatus.COMPLETED),
            (RequestStatus.COMPLETED, RequestStatus.ASSIGNED),
            (RequestStatus.CANCELLED, RequestStatus.PENDING),
            (RequestStatus.AWAITING_CONFIRMATION, RequestStatus.CANCELLED),
            (RequestStatus.ASSIGNED, RequestStatus.IN_PROGRESS),
            (RequestStatus.ASSIGNED, RequestStatus.PENDING),
        ],
    )
    def test_moves_outside_the_table(self, workflow, current, target):
        for actor in UserRole:
            with pytest.raises(InvalidTransitionError):
                workflow.validate(current, target, actor)

    def test_wrong_actor(self, workflow):
        with pytest.raises(PermissionDeniedError):
            workflow.validate(RequestStatus.PENDING, RequestStatus.ASSIGNED, UserRole.CUSTOMER)
        with pytest.raises(PermissionDeniedError):
            workflow.validate(
                RequestStatus.AWAITING_CONFIRMATION, RequestStatus.COMPLETED, UserRole.EMPLOYEE
            )

    def test_customer_cannot_cancel_assigned(self, workflow):
        with pytest.raises(PermissionDeniedError):
            workflow.validate(RequestStatus.ASSIGNED, RequestStatus.CANCELLED, UserRole.CUSTOMER)

    def test_cancel_picks_transition_of_actor(self, workflow):
        transition = workflow.validate(
            RequestStatus.PENDING, RequestStatus.CANCELLED, UserRole.CUSTOMER
        )
        assert transition is CUSTOMER_CANCEL

    def test_assign_count_mismatch(self, workflow):
        with pytest.raises(AssignmentCountMismatchError) as exc_info:
            workflow.validate(
                RequestStatus.PENDING,
                RequestStatus.ASSIGNED,
                UserRole.ADMIN,
                assigned_count=1,
                employee_count=2,
                request_id="r-1",
            )
        assert exc_info.value.expected == 2
        assert exc_info.value.selected == 1

    def test_unknown_status(self, workflow):
        with pytest.raises(InvalidInputError):
            workflow.validate("archived", RequestStatus.PENDING, UserRole.ADMIN)


class TestPolicy:
    def test_shortcut_allows_force_complete(self, workflow):
        assert workflow.allowed_targets(RequestStatus.ASSIGNED, UserRole.ADMIN) == {
            RequestStatus.COMPLETED,
            RequestStatus.CANCELLED,
        }
        assert FORCE_COMPLETE in workflow.transitions_for(UserRole.ADMIN)

    def test_strict_disables_force_complete(self, strict_workflow):
        assert strict_workflow.allowed_targets(RequestStatus.ASSIGNED, UserRole.ADMIN) == {
            RequestStatus.CANCELLED
        }
        with pytest.raises(InvalidTransitionError):
            strict_workflow.validate(
                RequestStatus.ASSIGNED, RequestStatus.COMPLETED, UserRole.ADMIN
            )

    @pytest.mark.parametrize("policy", [WorkflowPolicy.SHORTCUT, WorkflowPolicy.STRICT])
    @pytest.mark.parametrize("actor", [UserRole.CUSTOMER, UserRole.EMPLOYEE])
    def test_wrong_role_completion_same_under_both_policies(self, policy, actor):
        engine = StatusWorkflowEngine(policy)

        with pytest.raises(PermissionDeniedError):
            engine.validate(RequestStatus.ASSIGNED, RequestStatus.COMPLETED, actor)

    def test_final_status_accepts_nothing(self, workflow):
        for status in (RequestStatus.COMPLETED, RequestStatus.CANCELLED):
            for actor in UserRole:
                assert workflow.allowed_targets(status, actor) == set()
                with pytest.raises(InvalidTransitionError):
                    workflow.validate(status, RequestStatus.ASSIGNED, actor)

    def test_policy_from_setting_value(self):
        assert StatusWorkflowEngine("strict").policy == WorkflowPolicy.STRICT

    def test_can_transition(self, workflow):
        assert workflow.can_transition(
            RequestStatus.PENDING, RequestStatus.ASSIGNED, UserRole.ADMIN
        )
        assert not workflow.can_transition(
            RequestStatus.PENDING, RequestStatus.ASSIGNED, UserRole.EMPLOYEE
        )
        assert not workflow.can_transition(
            RequestStatus.COMPLETED, RequestStatus.CANCELLED, UserRole.ADMIN
        )

    def test_employee_transitions(self, workflow):
        names = {t.name for t in workflow.transitions_for(UserRole.EMPLOYEE)}
        assert names == {"mark_awaiting_confirmation"}


class TestPlan:
    def test_assign_has_no_field_changes(self, workflow, make_request):
        request = make_request(employee_count=2)
        change = workflow.plan(
            request, RequestStatus.ASSIGNED, UserRole.ADMIN, now=NOW, assigned_count=2
        )
        assert change.transition is ASSIGN
        assert change.source == RequestStatus.PENDING
        assert change.fields == {}

    def test_assign_count_checked_against_request(self, workflow, make_request):
        request = make_request(employee_count=3)
        with pytest.raises(AssignmentCountMismatchError):
            workflow.plan(request, RequestStatus.ASSIGNED, UserRole.ADMIN, assigned_count=2)

    def test_mark_awaiting_confirmation_sets_completed_at(self, workflow, make_request):
        request = make_request(status=RequestStatus.ASSIGNED)
        change = workflow.plan(
            request, RequestStatus.AWAITING_CONFIRMATION, UserRole.EMPLOYEE, now=NOW
        )
        assert change.fields == {"completed_at": NOW}

    def test_confirm_sets_confirmed_at(self, workflow, make_request):
        request = make_request(status=RequestStatus.AWAITING_CONFIRMATION, completed_at=NOW)
        change = workflow.plan(request, RequestStatus.COMPLETED, UserRole.CUSTOMER, now=NOW)
        assert change.fields == {"confirmed_at": NOW}

    def test_reject_clears_completed_at(self, workflow, make_request):
        request = make_request(status=RequestStatus.AWAITING_CONFIRMATION, completed_at=NOW)
        change = workflow.plan(request, RequestStatus.ASSIGNED, UserRole.CUSTOMER, now=NOW)
        assert change.transition.name == "reject_completion"
        assert change.fields == {"completed_at": None}

    def test_force_complete_keeps_existing_completed_at(self, workflow, make_request):
        earlier = datetime(2026, 11, 1, tzinfo=timezone.utc)
        request = make_request(status=RequestStatus.ASSIGNED, completed_at=earlier)
        change = workflow.plan(request, RequestStatus.COMPLETED, UserRole.ADMIN, now=NOW)
        assert change.fields == {"completed_at": earlier}

    def test_force_complete_stamps_now(self, workflow, make_request):
        request = make_request(status=RequestStatus.ASSIGNED)
        change = workflow.plan(request, RequestStatus.COMPLETED, UserRole.ADMIN, now=NOW)
        assert change.fields == {"completed_at": NOW}

    def test_cancel_has_no_field_changes(self, workflow, make_request):
        change = workflow.plan(make_request(), RequestStatus.CANCELLED, UserRole.CUSTOMER)
        assert change.target == RequestStatus.CANCELLED
        assert change.fields == {}

    def test_plan_does_not_mutate_request(self, workflow, make_request):
        request = make_request(id=uuid4(), status=RequestStatus.ASSIGNED)
        workflow.plan(request, RequestStatus.AWAITING_CONFIRMATION, UserRole.EMPLOYEE)
        assert request.status == RequestStatus.ASSIGNED
        assert request.completed_at is None
