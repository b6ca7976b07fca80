"""
API middleware package.
"""

from .error_handler import add_error_handlers
from .logging import add_logging_middleware

__all__ = ["add_error_handlers", "add_logging_middleware"]
