"""
Status workflow engine for cleaning requests.

The engine owns the transition table: which status moves exist, which role
may trigger each one, and which timestamp fields change with it. It never
touches the store; callers persist the returned StatusChange through the
request store gateway.
"""

from dataclasses import dataclass, field
from datetime import datetime, timezone
from enum import Enum
from typing import Any, Dict, FrozenSet, List, Optional, Set

from cleaning_dispatch.config.logging import get_logger
from cleaning_dispatch.domain.entities.cleaning_request import CleaningRequest
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

logger = get_logger(__name__)


class WorkflowPolicy(str, Enum):
    """Admin completion policy."""

    # Admin may close an assigned request directly
    SHORTCUT = "shortcut"
    # Completion always goes through employee report and customer confirmation
    STRICT = "strict"


@dataclass(frozen=True)
class Transition:
    """One row of the transition table."""

    name: str
    sources: FrozenSet[RequestStatus]
    target: RequestStatus
    actor: UserRole
    shortcut: bool = False


@dataclass(frozen=True)
class StatusChange:
    """A validated transition plus the field changes to persist with it."""

    transition: Transition
    source: RequestStatus
    target: RequestStatus
    fields: Dict[str, Any] = field(default_factory=dict)


ASSIGN = Transition(
    "assign",
    frozenset({RequestStatus.PENDING}),
    RequestStatus.ASSIGNED,
    UserRole.ADMIN,
)
FORCE_COMPLETE = Transition(
    "force_complete",
    frozenset({RequestStatus.ASSIGNED}),
    RequestStatus.COMPLETED,
    UserRole.ADMIN,
    shortcut=True,
)
MARK_AWAITING_CONFIRMATION = Transition(
    "mark_awaiting_confirmation",
    frozenset({RequestStatus.ASSIGNED, RequestStatus.IN_PROGRESS}),
    RequestStatus.AWAITING_CONFIRMATION,
    UserRole.EMPLOYEE,
)
CONFIRM_COMPLETION = Transition(
    "confirm_completion",
    frozenset({RequestStatus.AWAITING_CONFIRMATION}),
    RequestStatus.COMPLETED,
    UserRole.CUSTOMER,
)
REJECT_COMPLETION = Transition(
    "reject_completion",
    frozenset({RequestStatus.AWAITING_CONFIRMATION}),
    RequestStatus.ASSIGNED,
    UserRole.CUSTOMER,
)
ADMIN_CANCEL = Transition(
    "cancel",
    frozenset({RequestStatus.PENDING, RequestStatus.ASSIGNED}),
    RequestStatus.CANCELLED,
    UserRole.ADMIN,
)
CUSTOMER_CANCEL = Transition(
    "cancel",
    frozenset({RequestStatus.PENDING}),
    RequestStatus.CANCELLED,
    UserRole.CUSTOMER,
)

TRANSITIONS = (
    ASSIGN,
    FORCE_COMPLETE,
    MARK_AWAITING_CONFIRMATION,
    CONFIRM_COMPLETION,
    REJECT_COMPLETION,
    ADMIN_CANCEL,
    CUSTOMER_CANCEL,
)


class StatusWorkflowEngine:
    """Validates status moves and plans their side effects."""

    def __init__(self, policy: WorkflowPolicy = WorkflowPolicy.SHORTCUT):
        self.policy = WorkflowPolicy(policy)
        self.logger = logger

    @property
    def transitions(self) -> List[Transition]:
        """Transitions active under the configured policy."""
        if self.policy == WorkflowPolicy.STRICT:
            return [t for t in TRANSITIONS if not t.shortcut]
        return list(TRANSITIONS)

    def transitions_for(self, actor: UserRole) -> List[Transition]:
        """All transitions a role may trigger."""
        actor = UserRole(actor)
        return [t for t in self.transitions if t.actor == actor]

    def allowed_targets(self, current: RequestStatus, actor: UserRole) -> Set[RequestStatus]:
        """Statuses a role may move a request to from its current status."""
        current = self._coerce_status(current)
        return {t.target for t in self.transitions_for(actor) if current in t.sources}

    def can_transition(
        self, current: RequestStatus, target: RequestStatus, actor: UserRole
    ) -> bool:
        """Check if a role may move a request from current to target."""
        try:
            self.validate(current, target, actor)
        except (InvalidTransitionError, PermissionDeniedError):
            return False
        return True

    def validate(
        self,
        current: RequestStatus,
        target: RequestStatus,
        actor: UserRole,
        assigned_count: Optional[int] = None,
        employee_count: Optional[int] = None,
        request_id: Optional[str] = None,
    ) -> Transition:
        """
        Return the matching transition or raise.

        Whether a move belongs to another role is decided on the full table,
        so a wrong-role command is refused the same way under both policies.

        Raises:
            InvalidTransitionError: the move is not in the table, or is
                disabled by the policy for this role
            PermissionDeniedError: the move exists but not for this role
            AssignmentCountMismatchError: assigning with the wrong headcount
        """
        current = self._coerce_status(current)
        target = self._coerce_status(target)
        actor = UserRole(actor)

        if current.is_final():
            raise InvalidTransitionError(current.value, target.value)

        candidates = [
            t for t in TRANSITIONS if current in t.sources and t.target == target
        ]
        if not candidates:
            raise InvalidTransitionError(current.value, target.value)

        own = [t for t in candidates if t.actor == actor]
        if not own:
            raise PermissionDeniedError(
                actor.value, f"move a request from '{current.value}' to '{target.value}'"
            )

        active = self.transitions
        transition = next((t for t in own if t in active), None)
        if transition is None:
            raise InvalidTransitionError(current.value, target.value)

        if (
            transition is ASSIGN
            and assigned_count is not None
            and employee_count is not None
            and assigned_count != employee_count
        ):
            raise AssignmentCountMismatchError(
                request_id or "unknown", employee_count, assigned_count
            )

        return transition

    def plan(
        self,
        request: CleaningRequest,
        target: RequestStatus,
        actor: UserRole,
        now: Optional[datetime] = None,
        assigned_count: Optional[int] = None,
    ) -> StatusChange:
        """Validate a move for a concrete request and compute its field changes."""
        now = now or datetime.now(timezone.utc)
        transition = self.validate(
            request.status,
            target,
            actor,
            assigned_count=assigned_count,
            employee_count=request.employee_count,
            request_id=str(request.id),
        )

        fields: Dict[str, Any] = {}
        if transition is MARK_AWAITING_CONFIRMATION:
            fields["completed_at"] = now
        elif transition is CONFIRM_COMPLETION:
            fields["confirmed_at"] = now
        elif transition is REJECT_COMPLETION:
            fields["completed_at"] = None
        elif transition is FORCE_COMPLETE:
            fields["completed_at"] = request.completed_at or now

        self.logger.debug(
            "Status change planned",
            request_id=str(request.id),
            transition=transition.name,
            source=request.status.value,
            target=transition.target.value,
            actor=transition.actor.value,
        )
        return StatusChange(
            transition=transition,
            source=request.status,
            target=transition.target,
            fields=fields,
        )

    @staticmethod
    def _coerce_status(value) -> RequestStatus:
        try:
            return RequestStatus(value)
        except ValueError:
            raise InvalidInputError(
                "status", value, ", ".join(s.value for s in RequestStatus)
            )
