"""Horse repository."""

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import Horse
from app.repositories.base import BaseRepository


class HorseRepository(BaseRepository[Horse]):
    """Repository for Horse model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Horse, session)

    async def get_active(self, skip: int = 0, limit: int = 100) -> list[Horse]:
        """Get active horses ordered by name."""
        result = await self.session.execute(
            select(Horse)
            .where(Horse.is_active.is_(True))
            .order_by(Horse.name)
            .offset(skip)
            .limit(limit)
        )
        return list(result.scalars().all())

    async def count_active(self) -> int:
        """Count active horses."""
        return await self.count(filters={"is_active": True})

    async def deactivate(self, horse_id: int) -> Horse | None:
        """Soft-delete a horse. Past schedules keep pointing at it."""
        return await self.update(horse_id, {"is_active": False})
