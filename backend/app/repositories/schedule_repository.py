"""Schedule repository."""

from datetime import date

from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession
from sqlalchemy.orm import selectinload

from app.models import Schedule, ScheduleStatus
from app.repositories.base import BaseRepository


class ScheduleRepository(BaseRepository[Schedule]):
    """Repository for Schedule model."""

    def __init__(self, session: AsyncSession):
        super().__init__(Schedule, session)

    def _with_relations(self):
        # populate_existing reloads instances already in the session, whose
        # relationships may have been expired by a refresh
        return (
            select(Schedule)
            .options(
                selectinload(Schedule.horse),
                selectinload(Schedule.rider),
                selectinload(Schedule.trainer),
            )
            .execution_options(populate_existing=True)
        )

    async def get_with_relations(self, schedule_id: int) -> Schedule | None:
        """Get schedule with horse, rider and trainer loaded."""
        result = await self.session.execute(
            self._with_relations().where(Schedule.id == schedule_id)
        )
        return result.scalar_one_or_none()

    async def get_by_date(self, day: date) -> list[Schedule]:
        """Get every schedule on a day, any status, by start time."""
        result = await self.session.execute(
            self._with_relations()
            .where(Schedule.date == day)
            .order_by(Schedule.start_time)
        )
        return list(result.scalars().all())

    async def get_for_horse_on_date(
        self,
        horse_id: int,
        day: date,
        status: ScheduleStatus = ScheduleStatus.SCHEDULED,
        exclude_id: int | None = None,
    ) -> list[Schedule]:
        """Get one horse's schedules for one day, by start time."""
        query = select(Schedule).where(
            Schedule.horse_id == horse_id,
            Schedule.date == day,
            Schedule.status == status.value,
        )
        if exclude_id is not None:
            query = query.where(Schedule.id != exclude_id)

        query = query.order_by(Schedule.start_time)
        result = await self.session.execute(query)
        return list(result.scalars().all())

    async def get_scheduled_on_date(self, day: date) -> list[Schedule]:
        """Get Scheduled sessions on a day with horses loaded."""
        result = await self.session.execute(
            select(Schedule)
            .options(selectinload(Schedule.horse))
            .where(
                Schedule.date == day,
                Schedule.status == ScheduleStatus.SCHEDULED.value,
            )
            .order_by(Schedule.start_time)
        )
        return list(result.scalars().all())

    async def get_upcoming_for_rider(self, rider_id: int, today: date) -> list[Schedule]:
        """Get a rider's Scheduled sessions from today on."""
        result = await self.session.execute(
            self._with_relations()
            .where(
                Schedule.rider_id == rider_id,
                Schedule.date >= today,
                Schedule.status == ScheduleStatus.SCHEDULED.value,
            )
            .order_by(Schedule.date, Schedule.start_time)
        )
        return list(result.scalars().all())

    async def get_upcoming_for_trainer(self, trainer_id: int, today: date) -> list[Schedule]:
        """Get a trainer's Scheduled sessions from today on."""
        result = await self.session.execute(
            self._with_relations()
            .where(
                Schedule.trainer_id == trainer_id,
                Schedule.date >= today,
                Schedule.status == ScheduleStatus.SCHEDULED.value,
            )
            .order_by(Schedule.date, Schedule.start_time)
        )
        return list(result.scalars().all())
