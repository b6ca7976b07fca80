"""
Request workflow domain exceptions.
"""


class WorkflowError(Exception):
    """Base exception for request workflow errors."""

    pass


class InvalidTransitionError(WorkflowError):
    """Raised when a status move is not part of the workflow."""

    def __init__(self, current_status: str, target_status: str):
        self.current_status = current_status
        self.target_status = target_status
        super().__init__(
            f"Invalid status transition '{current_status}' -> '{target_status}'"
        )


class PermissionDeniedError(WorkflowError):
    """Raised when the acting role may not perform an operation."""

    def __init__(self, role: str, action: str):
        self.role = role
        self.action = action
        super().__init__(f"Role '{role}' is not allowed to {action}")
