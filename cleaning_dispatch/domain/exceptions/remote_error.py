"""
Store-related domain exceptions.
"""


class RemoteFailure(Exception):
    """Raised when the backing store is unavailable or rejects a write."""

    def __init__(self, operation: str, reason: str = None):
        self.operation = operation
        self.reason = reason
        message = f"Store operation '{operation}' failed"
        if reason:
            message += f": {reason}"
        super().__init__(message)
