"""Feeding task repository."""

from datetime import date

from sqlalchemy import delete, select
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import FeedingTask
from app.repositories.base import BaseRepository


class FeedingTaskRepository(BaseRepository[FeedingTask]):
    """Repository for FeedingTask model."""

    def __init__(self, session: AsyncSession):
        super().__init__(FeedingTask, session)

    async def get_by_date(self, day: date) -> list[FeedingTask]:
        """Get a day's tasks ordered by the time the ride ends."""
        result = await self.session.execute(
            select(FeedingTask)
            .where(FeedingTask.date == day)
            .order_by(FeedingTask.end_time)
        )
        return list(result.scalars().all())

    async def get_by_schedule(self, schedule_id: int) -> FeedingTask | None:
        """Get the task created for a schedule, if any."""
        result = await self.session.execute(
            select(FeedingTask).where(FeedingTask.schedule_id == schedule_id).limit(1)
        )
        return result.scalar_one_or_none()

    async def delete_by_schedule(self, schedule_id: int) -> int:
        """Delete every task attached to a schedule."""
        result = await self.session.execute(
            delete(FeedingTask).where(FeedingTask.schedule_id == schedule_id)
        )
        await self.session.flush()
        return result.rowcount
