"""
Identity-related domain exceptions.
"""


class NotAuthenticatedError(Exception):
    """Raised when no signed-in profile is available."""

    def __init__(self, message: str = "No signed-in profile"):
        super().__init__(message)
