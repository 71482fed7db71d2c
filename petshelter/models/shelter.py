"""Shelter model."""

from sqlalchemy import String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from petshelter.permissions import ShelterData

from .base import Base, TimestampMixin, UUIDPrimaryKeyMixin


class Shelter(UUIDPrimaryKeyMixin, Base, TimestampMixin):
    """Shelter (NGO) that hosts animals for adoption."""

    __tablename__ = "shelters"

    name: Mapped[str] = mapped_column(String(255), nullable=False, index=True)
    email: Mapped[str] = mapped_column(String(255), unique=True, nullable=False)
    phone: Mapped[str] = mapped_column(String(20), nullable=False)
    cnpj: Mapped[str | None] = mapped_column(String(18), unique=True)
    description: Mapped[str | None] = mapped_column(Text)

    # Address
    address: Mapped[str] = mapped_column(Text, nullable=False)
    city: Mapped[str] = mapped_column(String(100), nullable=False, index=True)
    state: Mapped[str] = mapped_column(String(2), nullable=False, index=True)
    zip_code: Mapped[str] = mapped_column(String(10), nullable=False)
    website: Mapped[str | None] = mapped_column(String(255))

    # Relationships
    animals: Mapped[list["Animal"]] = relationship(
        "Animal", back_populates="shelter", cascade="all, delete-orphan", passive_deletes=True
    )
    managers: Mapped[list["ShelterManager"]] = relationship(
        "ShelterManager", back_populates="shelter", cascade="all, delete-orphan", passive_deletes=True
    )

    def to_permission_data(self) -> ShelterData:
        return ShelterData(id=self.id)

    def __repr__(self) -> str:
        return f"<Shelter(id={self.id}, name='{self.name}')>"
