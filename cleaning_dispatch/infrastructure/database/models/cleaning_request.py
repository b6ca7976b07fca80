"""
Cleaning request SQLAlchemy model.
"""

from sqlalchemy import (
    CheckConstraint,
    Column,
    Date,
    DateTime,
    ForeignKey,
    Integer,
    Numeric,
    String,
    Text,
    Time,
    Uuid,
)
from sqlalchemy.orm import relationship

from .base import BaseModel, utcnow


class CleaningRequestModel(BaseModel):
    """Cleaning request database model."""

    __tablename__ = "cleaning_requests"
    __table_args__ = (
        CheckConstraint(
            "home_size IN ('small', 'medium', 'large')",
            name="ck_cleaning_requests_home_size",
        ),
        CheckConstraint(
            "status IN ('pending', 'assigned', 'in_progress', "
            "'awaiting_confirmation', 'completed', 'cancelled')",
            name="ck_cleaning_requests_status",
        ),
        CheckConstraint(
            "employee_count BETWEEN 1 AND 5",
            name="ck_cleaning_requests_employee_count",
        ),
    )

    customer_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True
    )

    # Location fields
    city = Column(String(100), nullable=False)
    district = Column(String(100), nullable=False)
    neighborhood = Column(String(100), nullable=False)
    address_detail = Column(Text, nullable=False)
    address = Column(Text, nullable=False, default="")

    # Scheduling
    service_date = Column(Date, nullable=False, index=True)
    service_time = Column(Time, nullable=False)

    home_size = Column(String(10), nullable=False)
    employee_count = Column(Integer, nullable=False, default=1)
    special_notes = Column(Text)

    status = Column(String(30), nullable=False, default="pending", index=True)
    price = Column(Numeric(10, 2))

    completed_at = Column(DateTime(timezone=True))
    confirmed_at = Column(DateTime(timezone=True))
    updated_at = Column(
        DateTime(timezone=True), default=utcnow, onupdate=utcnow, nullable=False
    )

    # Relationships
    customer = relationship("ProfileModel", back_populates="cleaning_requests")
    assignments = relationship(
        "RequestAssignmentModel",
        back_populates="request",
        cascade="all, delete-orphan",
    )

    def __repr__(self) -> str:
        return f"<CleaningRequest(id={self.id}, status={self.status})>"
