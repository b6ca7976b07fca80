"""
Pricing for cleaning requests.
"""

from decimal import Decimal

from cleaning_dispatch.domain.entities.cleaning_request import (
    MAX_EMPLOYEE_COUNT,
    MIN_EMPLOYEE_COUNT,
)
from cleaning_dispatch.domain.exceptions.validation_error import InvalidInputError
from cleaning_dispatch.domain.value_objects.home_size import HomeSize

BASE_RATES = {
    HomeSize.SMALL: Decimal("500"),
    HomeSize.MEDIUM: Decimal("800"),
    HomeSize.LARGE: Decimal("1200"),
}

# Each employee beyond the first adds half of the base rate
EXTRA_EMPLOYEE_FACTOR = Decimal("0.5")


def calculate_price(home_size, employee_count: int) -> Decimal:
    """
    Price a cleaning from the home size and the number of employees.

    ``base(home_size) * (1 + (employee_count - 1) * 0.5)``

    Raises:
        InvalidInputError: if the size or the employee count is out of range
    """
    try:
        size = HomeSize(home_size)
    except ValueError:
        raise InvalidInputError(
            "home_size", home_size, ", ".join(s.value for s in HomeSize)
        )

    if (
        isinstance(employee_count, bool)
        or not isinstance(employee_count, int)
        or not MIN_EMPLOYEE_COUNT <= employee_count <= MAX_EMPLOYEE_COUNT
    ):
        raise InvalidInputError(
            "employee_count",
            employee_count,
            f"{MIN_EMPLOYEE_COUNT}-{MAX_EMPLOYEE_COUNT}",
        )

    multiplier = 1 + (employee_count - 1) * EXTRA_EMPLOYEE_FACTOR
    return (BASE_RATES[size] * multiplier).quantize(Decimal("0.01"))


class PricingCalculator:
    """Injectable wrapper so pricing can be switched off per deployment."""

    def __init__(self, enabled: bool = True):
        self.enabled = enabled

    def price(self, home_size, employee_count: int):
        """Return the price, or None when pricing is disabled."""
        if not self.enabled:
            return None
        return calculate_price(home_size, employee_count)
