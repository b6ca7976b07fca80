"""
Profile SQLAlchemy model.
"""

from sqlalchemy import CheckConstraint, Column, String
from sqlalchemy.orm import relationship

from .base import BaseModel


class ProfileModel(BaseModel):
    """Profile database model."""

    __tablename__ = "profiles"
    __table_args__ = (
        CheckConstraint(
            "role IN ('admin', 'employee', 'customer')", name="ck_profiles_role"
        ),
    )

    email = Column(String(255), nullable=False, unique=True)
    full_name = Column(String(255), nullable=False)
    role = Column(String(20), nullable=False, index=True)
    phone = Column(String(20))

    # Relationships
    cleaning_requests = relationship("CleaningRequestModel", back_populates="customer")
    assignments = relationship("RequestAssignmentModel", back_populates="employee")

    def __repr__(self) -> str:
        return f"<Profile(id={self.id}, role={self.role}, email={self.email})>"
