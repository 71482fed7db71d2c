"""Shelter manager association model."""

from datetime import datetime

from sqlalchemy import DateTime, ForeignKey, String, func
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base


class ShelterManager(Base):
    """Users responsible for a shelter."""

    __tablename__ = "shelter_managers"

    shelter_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("shelters.id", ondelete="CASCADE"),
        primary_key=True,
    )
    user_id: Mapped[str] = mapped_column(
        String(36),
        ForeignKey("users.id", ondelete="CASCADE"),
        primary_key=True,
        index=True,
    )
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        server_default=func.now(),
        nullable=False,
    )

    # Relationships
    shelter: Mapped["Shelter"] = relationship("Shelter", back_populates="managers")
    user: Mapped["User"] = relationship("User", back_populates="managed_shelters")

    def __repr__(self) -> str:
        return f"<ShelterManager(shelter_id={self.shelter_id}, user_id={self.user_id})>"
