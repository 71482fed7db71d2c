"""Shelter manager assignments."""

from sqlalchemy import delete, select

from petshelter.models.shelter_manager import ShelterManager

from .base import BaseService


class ShelterManagerService(BaseService):
    """Service for the user <-> shelter management relation."""

    model = ShelterManager
    model_name = "shelterManagers"

    async def get_user_managed_shelter_ids(self, user_id: str) -> list[str]:
        """Ids of the shelters ``user_id`` manages."""
        async with self._operation("getUserManagedShelterIds"):
            result = await self.db.execute(
                select(ShelterManager.shelter_id).where(ShelterManager.user_id == user_id)
            )
            return list(result.scalars().all())

    async def get_shelter_manager_ids(self, shelter_id: str) -> list[str]:
        """Ids of the users managing ``shelter_id``."""
        async with self._operation("getShelterManagerIds"):
            result = await self.db.execute(
                select(ShelterManager.user_id)
                .where(ShelterManager.shelter_id == shelter_id)
                .order_by(ShelterManager.created_at)
            )
            return list(result.scalars().all())

    async def add_shelter_manager(self, shelter_id: str, user_id: str) -> None:
        async with self._operation("addShelterManager"):
            self.db.add(ShelterManager(shelter_id=shelter_id, user_id=user_id))
            await self.db.commit()

    async def remove_shelter_manager(self, shelter_id: str, user_id: str) -> bool:
        """Remove an assignment; returns False when it did not exist."""
        async with self._operation("removeShelterManager"):
            result = await self.db.execute(
                delete(ShelterManager).where(
                    ShelterManager.shelter_id == shelter_id,
                    ShelterManager.user_id == user_id,
                )
            )
            await self.db.commit()
            return result.rowcount > 0
