"""User model."""

from sqlalchemy import Boolean, String
from sqlalchemy.orm import Mapped, mapped_column, relationship

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class User(UUIDPrimaryKeyMixin, Base, TimestampMixin):
    """User model representing adopters, donors, shelter managers and admins."""

    __tablename__ = "users"

    email: Mapped[str] = mapped_column(String(255), unique=True, index=True, nullable=False)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    password_hash: Mapped[str] = mapped_column(String(255), nullable=False)

    # Role name used to pick the permission template; None means no role resolved
    user_type: Mapped[str | None] = mapped_column(String(32), index=True)
    is_active: Mapped[bool] = mapped_column(Boolean, default=True, nullable=False)

    # Relationships
    adoption_requests: Mapped[list["AdoptionRequest"]] = relationship(
        "AdoptionRequest", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )
    animals_for_adoption: Mapped[list["Animal"]] = relationship(
        "Animal", back_populates="owner", cascade="all, delete-orphan", passive_deletes=True
    )
    managed_shelters: Mapped[list["ShelterManager"]] = relationship(
        "ShelterManager", back_populates="user", cascade="all, delete-orphan", passive_deletes=True
    )

    def __repr__(self) -> str:
        return f"<User(id={self.id}, email='{self.email}', user_type='{self.user_type}')>"
