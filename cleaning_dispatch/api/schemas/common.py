"""
Common API schemas.
"""

from pydantic import BaseModel


class ErrorResponse(BaseModel):
    """Body returned by the error handlers."""

    error: str
    message: str
    type: str
