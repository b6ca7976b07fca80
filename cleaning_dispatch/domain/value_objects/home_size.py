"""
Home size value object.
"""

from enum import Enum


class HomeSize(str, Enum):
    """Size class of the home to be cleaned."""

    SMALL = "small"
    MEDIUM = "medium"
    LARGE = "large"
