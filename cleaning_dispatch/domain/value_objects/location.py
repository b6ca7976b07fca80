"""
Location value object.
"""

from dataclasses import dataclass

from cleaning_dispatch.domain.exceptions.validation_error import RequiredFieldError


@dataclass(frozen=True)
class Location:
    """Where the cleaning takes place."""

    city: str
    district: str
    neighborhood: str
    address_detail: str

    def __post_init__(self):
        """Validate location fields."""
        for field_name in ("city", "district", "neighborhood", "address_detail"):
            value = getattr(self, field_name)
            if not value or not value.strip():
                raise RequiredFieldError(field_name)

    @property
    def full_address(self) -> str:
        """Get formatted full address."""
        return (
            f"{self.address_detail}, {self.neighborhood}, "
            f"{self.district}/{self.city}"
        )

    def to_dict(self) -> dict:
        """Convert to dictionary."""
        return {
            "city": self.city,
            "district": self.district,
            "neighborhood": self.neighborhood,
            "address_detail": self.address_detail,
        }
