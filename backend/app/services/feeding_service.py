"""Feeding service: post-training meal reminders for stable hands."""

from datetime import date, datetime, timezone

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.models import FeedingTask
from app.repositories import FeedingTaskRepository, ScheduleRepository

logger = structlog.get_logger(__name__)


class FeedingService:
    """Service for feeding task operations."""

    def __init__(self, session: AsyncSession):
        self.session = session
        self.feeding_repo = FeedingTaskRepository(session)
        self.schedule_repo = ScheduleRepository(session)

    async def get_by_date(self, day: date) -> list[FeedingTask]:
        """Get a day's feeding tasks."""
        return await self.feeding_repo.get_by_date(day)

    async def set_completed(
        self,
        task_id: int,
        completed: bool,
        completed_by: str | None = None,
    ) -> FeedingTask | None:
        """Mark a task done (or undo it) and mirror the flag on its schedule."""
        data = {
            "completed": completed,
            "completed_at": datetime.now(timezone.utc) if completed else None,
            "completed_by": completed_by if completed else None,
        }
        task = await self.feeding_repo.update(task_id, data)
        if task is None:
            return None

        if task.schedule_id is not None:
            await self.schedule_repo.update(task.schedule_id, {"feeding_done": completed})

        logger.info("feeding_task_updated", task_id=task_id, completed=completed)
        return task

    async def generate_for_date(self, day: date) -> list[FeedingTask]:
        """Create missing tasks for the day's booked rides.

        Only horses with a post-training meal get a task, and a schedule never
        gets a second one.
        """
        created = []
        for schedule in await self.schedule_repo.get_scheduled_on_date(day):
            horse = schedule.horse
            if horse is None or not horse.post_training_meal:
                continue
            if await self.feeding_repo.get_by_schedule(schedule.id):
                continue

            task = await self.feeding_repo.create({
                "schedule_id": schedule.id,
                "horse_name": horse.name,
                "end_time": schedule.end_time,
                "meal_description": horse.post_training_meal,
                "date": schedule.date,
            })
            created.append(task)

        logger.info("feeding_tasks_generated", date=day.isoformat(), created=len(created))
        return created
