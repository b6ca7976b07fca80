"""
Request assignment SQLAlchemy model.
"""

from sqlalchemy import Column, ForeignKey, UniqueConstraint, Uuid
from sqlalchemy.orm import relationship

from .base import BaseModel


class RequestAssignmentModel(BaseModel):
    """Join table between cleaning requests and employee profiles."""

    __tablename__ = "request_assignments"
    __table_args__ = (
        UniqueConstraint(
            "request_id", "employee_id", name="uq_request_assignments_pair"
        ),
    )

    request_id = Column(
        Uuid(as_uuid=True),
        ForeignKey("cleaning_requests.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    employee_id = Column(
        Uuid(as_uuid=True), ForeignKey("profiles.id"), nullable=False, index=True
    )

    # Relationships
    request = relationship("CleaningRequestModel", back_populates="assignments")
    employee = relationship("ProfileModel", back_populates="assignments")

    def __repr__(self) -> str:
        return (
            f"<RequestAssignment(request_id={self.request_id}, "
            f"employee_id={self.employee_id})>"
        )
