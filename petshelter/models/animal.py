"""Animal model."""

from enum import Enum
from typing import Optional

from sqlalchemy import Boolean, ForeignKey, Integer, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshelter.permissions import AnimalData

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class AnimalType(str, Enum):
    DOG = "dog"
    CAT = "cat"
    OTHER = "other"


class AnimalSize(str, Enum):
    SMALL = "small"
    MEDIUM = "medium"
    BIG = "big"


class AnimalGender(str, Enum):
    MALE = "male"
    FEMALE = "female"


class Animal(UUIDPrimaryKeyMixin, Base, TimestampMixin):
    """Animal available for adoption, owned by a shelter or by a donor."""

    __tablename__ = "animals"

    # Owned by a shelter OR by a user
    shelter_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("shelters.id", ondelete="CASCADE"), index=True
    )
    user_id: Mapped[str | None] = mapped_column(
        String(36), ForeignKey("users.id", ondelete="CASCADE"), index=True
    )

    name: Mapped[str] = mapped_column(String(255), nullable=False)
    type: Mapped[str] = mapped_column(String(10), nullable=False, index=True)
    breed: Mapped[str | None] = mapped_column(String(100))
    age: Mapped[int | None] = mapped_column(Integer)  # months
    size: Mapped[str] = mapped_column(String(10), nullable=False)
    gender: Mapped[str] = mapped_column(String(10), nullable=False)
    color: Mapped[str | None] = mapped_column(String(100))
    description: Mapped[str | None] = mapped_column(Text)
    health_info: Mapped[str | None] = mapped_column(Text)  # vaccines, neutering, etc
    adoption_reason: Mapped[str | None] = mapped_column(Text)
    is_adopted: Mapped[bool] = mapped_column(Boolean, default=False, nullable=False, index=True)
    image_url: Mapped[str | None] = mapped_column(String(500))

    # Relationships
    shelter: Mapped[Optional["Shelter"]] = relationship("Shelter", back_populates="animals")
    owner: Mapped[Optional["User"]] = relationship("User", back_populates="animals_for_adoption")
    adoption_requests: Mapped[list["AdoptionRequest"]] = relationship(
        "AdoptionRequest", back_populates="animal", cascade="all, delete-orphan", passive_deletes=True
    )

    def to_permission_data(self) -> AnimalData:
        return AnimalData(id=self.id, user_id=self.user_id, shelter_id=self.shelter_id)

    def __repr__(self) -> str:
        return f"<Animal(id={self.id}, name='{self.name}', type='{self.type}')>"
