"""SQLAlchemy-backed store for welfare checks."""

from datetime import date

from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.ext.asyncio import AsyncSession

from app.exceptions import WelfareStoreError
from app.models import Horse, Schedule, ScheduleStatus
from app.repositories.horse_repository import HorseRepository
from app.repositories.schedule_repository import ScheduleRepository


class SqlWelfareStore:
    """Read-only WelfareStore over the horse and schedule tables.

    Database errors surface as WelfareStoreError so callers can tell an
    unreadable store from a failed check.
    """

    def __init__(self, session: AsyncSession):
        self.horse_repo = HorseRepository(session)
        self.schedule_repo = ScheduleRepository(session)

    async def get_horse(self, horse_id: int) -> Horse | None:
        try:
            return await self.horse_repo.get(horse_id)
        except SQLAlchemyError as e:
            raise WelfareStoreError(f"Could not load horse {horse_id}") from e

    async def get_sessions_for_horse_on_date(
        self,
        horse_id: int,
        day: date,
        exclude_id: int | None = None,
    ) -> list[Schedule]:
        try:
            return await self.schedule_repo.get_for_horse_on_date(
                horse_id,
                day,
                status=ScheduleStatus.SCHEDULED,
                exclude_id=exclude_id,
            )
        except SQLAlchemyError as e:
            raise WelfareStoreError(
                f"Could not load sessions for horse {horse_id} on {day}"
            ) from e
