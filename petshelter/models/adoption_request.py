"""Adoption request model."""

from datetime import datetime
from enum import Enum

from sqlalchemy import Boolean, DateTime, ForeignKey, String, Text, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshelter.permissions import AdoptionRequestData

from .base import Base, UUIDPrimaryKeyMixin


class AdoptionStatus(str, Enum):
    PENDING = "pending"
    APPROVED = "approved"
    REJECTED = "rejected"
    COMPLETED = "completed"


class AdoptionRequest(UUIDPrimaryKeyMixin, Base):
    """Request from a user to adopt an animal."""

    __tablename__ = "adoption_requests"

    user_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), nullable=False, index=True
    )
    animal_id: Mapped[str] = mapped_column(
        String(36), ForeignKey("animals.id", ondelete="CASCADE"), nullable=False, index=True
    )
    status: Mapped[str] = mapped_column(
        String(20), default=AdoptionStatus.PENDING.value, nullable=False, index=True
    )

    # Questionnaire
    message: Mapped[str | None] = mapped_column(Text)
    has_experience: Mapped[bool | None] = mapped_column(Boolean, default=False)
    has_other_pets: Mapped[bool | None] = mapped_column(Boolean, default=False)
    has_children: Mapped[bool | None] = mapped_column(Boolean, default=False)
    house_type: Mapped[str | None] = mapped_column(String(50))  # house, apartment

    # Response from the donor or shelter
    feedback: Mapped[str | None] = mapped_column(Text)

    requested_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )
    responded_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))
    completed_at: Mapped[datetime | None] = mapped_column(DateTime(timezone=True))

    # Relationships
    user: Mapped["User"] = relationship("User", back_populates="adoption_requests")
    animal: Mapped["Animal"] = relationship("Animal", back_populates="adoption_requests")

    def to_permission_data(self) -> AdoptionRequestData:
        return AdoptionRequestData(id=self.id, user_id=self.user_id, animal_id=self.animal_id)

    def __repr__(self) -> str:
        return f"<AdoptionRequest(id={self.id}, animal_id={self.animal_id}, status='{self.status}')>"
