"""Schedule service: booking, editing and completing riding sessions."""

from datetime import date

import structlog
from sqlalchemy.ext.asyncio import AsyncSession

from app.config import Settings, get_settings
from app.exceptions import BookingRejected, RecordNotFound, WelfareStoreError
from app.models import Horse, PaymentMethod, Schedule, ScheduleStatus, User
from app.repositories import (
    FeedingTaskRepository,
    HorseRepository,
    ScheduleRepository,
    SqlWelfareStore,
    UserRepository,
)
from app.scheduling import ValidationResult, WelfareStore, WelfareValidator, add_minutes
from app.schemas import (
    ScheduleCompleteResponse,
    ScheduleCreate,
    ScheduleResponse,
    ScheduleUpdate,
    WelfareCheckRequest,
)

logger = structlog.get_logger(__name__)

LEVEL_RANKS = {
    "BEGINNER": 1,
    "INTERMEDIATE": 2,
    "ADVANCED": 3,
}

WELFARE_UNAVAILABLE_WARNING = (
    "Welfare limits could not be checked (store unavailable); "
    "the booking was not checked against the horse's limits"
)
WELFARE_UNAVAILABLE_ERROR = "Welfare limits could not be checked (store unavailable)"
INACTIVE_HORSE_ERROR = "Horse is not active"

# Fields whose change puts a session back through the welfare checks
_WELFARE_FIELDS = ("horse_id", "date", "start_time", "duration")
_NON_NULLABLE_FIELDS = (*_WELFARE_FIELDS, "rider_id", "trainer_id", "status", "paid")


def level_mismatch_warning(horse_level: str | None, rider_level: str | None) -> str | None:
    """Warn when the rider is less experienced than the horse requires."""
    horse_rank = LEVEL_RANKS.get(horse_level or "", 0)
    rider_rank = LEVEL_RANKS.get(rider_level or "", 0)
    if rider_rank < horse_rank:
        return f"Level mismatch: Horse is {horse_level}, Rider is {rider_level or 'unknown'}"
    return None


class ScheduleService:
    """Service for schedule operations."""

    def __init__(
        self,
        session: AsyncSession,
        store: WelfareStore | None = None,
        settings: Settings | None = None,
    ):
        self.session = session
        self.schedule_repo = ScheduleRepository(session)
        self.horse_repo = HorseRepository(session)
        self.user_repo = UserRepository(session)
        self.feeding_repo = FeedingTaskRepository(session)
        self.validator = WelfareValidator(store or SqlWelfareStore(session))
        self.settings = settings or get_settings()

    async def check_welfare(self, data: WelfareCheckRequest) -> ValidationResult:
        """Advisory pre-submit check.

        When the store cannot be read the outcome depends on
        ``welfare_on_infra_error``: "allow" returns a passing result carrying
        a warning, "block" returns a failing one.
        """
        try:
            result = await self.validator.validate(
                data.horse_id,
                data.date,
                data.start_time,
                data.duration,
                exclude_session_id=data.schedule_id,
            )
        except WelfareStoreError:
            result = ValidationResult()
            if self.settings.welfare_on_infra_error == "allow":
                logger.warning(
                    "welfare_check_skipped",
                    horse_id=data.horse_id,
                    policy="allow",
                    exc_info=True,
                )
                result.add_warning(WELFARE_UNAVAILABLE_WARNING)
            else:
                logger.error(
                    "welfare_check_unavailable",
                    horse_id=data.horse_id,
                    policy="block",
                    exc_info=True,
                )
                result.add_error(WELFARE_UNAVAILABLE_ERROR)
            return result

        horse = await self.horse_repo.get(data.horse_id)
        if horse is not None and not horse.is_active and data.schedule_id is None:
            result.add_error(INACTIVE_HORSE_ERROR)

        if horse is not None and data.rider_id is not None:
            rider = await self.user_repo.get(data.rider_id)
            if rider:
                warning = level_mismatch_warning(horse.level, rider.level)
                if warning:
                    result.add_warning(warning)

        return result

    async def get_by_date(self, day: date) -> list[ScheduleResponse]:
        """Get all schedules for a day."""
        schedules = await self.schedule_repo.get_by_date(day)
        return [self.to_response(s) for s in schedules]

    async def get_rider_schedules(
        self, rider_id: int, today: date | None = None
    ) -> list[ScheduleResponse]:
        """Get a rider's upcoming sessions."""
        schedules = await self.schedule_repo.get_upcoming_for_rider(
            rider_id, today or date.today()
        )
        return [self.to_response(s) for s in schedules]

    async def get_trainer_schedules(
        self, trainer_id: int, today: date | None = None
    ) -> list[ScheduleResponse]:
        """Get a trainer's upcoming sessions."""
        schedules = await self.schedule_repo.get_upcoming_for_trainer(
            trainer_id, today or date.today()
        )
        return [self.to_response(s) for s in schedules]

    async def get_schedule(self, schedule_id: int) -> ScheduleResponse | None:
        """Get a schedule by ID."""
        schedule = await self.schedule_repo.get_with_relations(schedule_id)
        if not schedule:
            return None
        return self.to_response(schedule)

    async def create_schedule(self, data: ScheduleCreate) -> tuple[ScheduleResponse, list[str]]:
        """
        Book a session.

        Returns:
            Tuple of (stored schedule, advisory warnings)

        Raises:
            BookingRejected: if any welfare rule is violated or the horse
                is inactive
            RecordNotFound: if the rider or trainer does not exist
            WelfareStoreError: if the store cannot be read
        """
        result = await self.validator.validate(
            data.horse_id, data.date, data.start_time, data.duration
        )
        if not result.valid:
            raise BookingRejected(result.errors)

        horse = await self.horse_repo.get(data.horse_id)
        if not horse.is_active:
            raise BookingRejected([INACTIVE_HORSE_ERROR])
        rider = await self._require_user(data.rider_id, "Rider")
        await self._require_user(data.trainer_id, "Trainer")

        warning = level_mismatch_warning(horse.level, rider.level)
        if warning:
            result.add_warning(warning)

        end_time = add_minutes(data.start_time, data.duration)
        schedule = await self.schedule_repo.create({
            **data.model_dump(),
            "end_time": end_time,
            "status": ScheduleStatus.SCHEDULED.value,
        })

        if horse.post_training_meal:
            await self.feeding_repo.create({
                "schedule_id": schedule.id,
                "horse_name": horse.name,
                "end_time": end_time,
                "meal_description": horse.post_training_meal,
                "date": data.date,
            })

        logger.info(
            "schedule_created",
            schedule_id=schedule.id,
            horse_id=data.horse_id,
            date=data.date.isoformat(),
            start_time=data.start_time,
            end_time=end_time,
            warnings=len(result.warnings),
        )
        schedule = await self.schedule_repo.get_with_relations(schedule.id)
        return self.to_response(schedule), result.warnings

    async def update_schedule(
        self, schedule_id: int, data: ScheduleUpdate
    ) -> ScheduleResponse | None:
        """
        Edit a session, re-checking welfare when its slot changes or it is
        made active again.

        Raises:
            BookingRejected: if the edited session violates a welfare rule
                or is moved onto an inactive horse
        """
        existing = await self.schedule_repo.get(schedule_id)
        if not existing:
            return None

        changes = data.model_dump(exclude_unset=True)
        for field in _NON_NULLABLE_FIELDS:
            if field in changes and changes[field] is None:
                del changes[field]
        if "status" in changes:
            changes["status"] = changes["status"].value

        horse_id = changes.get("horse_id", existing.horse_id)
        day = changes.get("date", existing.date)
        start_time = changes.get("start_time", existing.start_time)
        duration = changes.get("duration", existing.duration)
        status = changes.get("status", existing.status)

        slot_changed = any(field in changes for field in _WELFARE_FIELDS)
        reactivated = "status" in changes and status == ScheduleStatus.SCHEDULED.value

        if slot_changed or reactivated:
            result = await self.validator.validate(
                horse_id, day, start_time, duration, exclude_session_id=schedule_id
            )
            if not result.valid:
                raise BookingRejected(result.errors)

        horse = None
        if horse_id != existing.horse_id:
            horse = await self.horse_repo.get(horse_id)
            if not horse.is_active:
                raise BookingRejected([INACTIVE_HORSE_ERROR])

        if slot_changed:
            changes["end_time"] = add_minutes(start_time, duration)

        await self.schedule_repo.update(schedule_id, changes)

        if horse is not None:
            await self._sync_feeding_task(schedule_id, horse, day, changes["end_time"])
        elif "end_time" in changes:
            task = await self.feeding_repo.get_by_schedule(schedule_id)
            if task is not None:
                await self.feeding_repo.update(
                    task.id, {"end_time": changes["end_time"], "date": day}
                )

        logger.info("schedule_updated", schedule_id=schedule_id, fields=sorted(changes))

        schedule = await self.schedule_repo.get_with_relations(schedule_id)
        return self.to_response(schedule)

    async def complete_schedule(self, schedule_id: int) -> ScheduleCompleteResponse | None:
        """Mark a session completed and charge subscription riders."""
        schedule = await self.schedule_repo.get_with_relations(schedule_id)
        if not schedule:
            return None

        if schedule.status == ScheduleStatus.COMPLETED.value:
            return ScheduleCompleteResponse(message="Schedule already completed")

        # read before the update, which refreshes the instance
        rider = schedule.rider
        duration = schedule.duration
        await self.schedule_repo.update(schedule_id, {"status": ScheduleStatus.COMPLETED.value})

        if rider is not None and rider.payment_method == PaymentMethod.SUBSCRIPTION.value:
            hours_to_deduct = duration / 60
            remaining = max(0.0, (rider.subscription_hours or 0.0) - hours_to_deduct)
            await self.user_repo.update(rider.id, {"subscription_hours": remaining})

            logger.info(
                "subscription_hours_deducted",
                schedule_id=schedule_id,
                rider_id=rider.id,
                deducted_hours=hours_to_deduct,
                remaining_hours=remaining,
            )
            return ScheduleCompleteResponse(
                message="Schedule completed and subscription hours deducted",
                deducted_hours=hours_to_deduct,
                remaining_hours=remaining,
            )

        logger.info("schedule_completed", schedule_id=schedule_id)
        return ScheduleCompleteResponse(message="Schedule completed")

    async def delete_schedule(self, schedule_id: int) -> bool:
        """Cancel a session together with its feeding task."""
        await self.feeding_repo.delete_by_schedule(schedule_id)
        deleted = await self.schedule_repo.delete(schedule_id)
        if deleted:
            logger.info("schedule_deleted", schedule_id=schedule_id)
        return deleted

    async def _sync_feeding_task(
        self, schedule_id: int, horse: Horse, day: date, end_time: str
    ) -> None:
        """Point a session's meal reminder at the horse now riding it."""
        task = await self.feeding_repo.get_by_schedule(schedule_id)
        if not horse.post_training_meal:
            if task is not None:
                await self.feeding_repo.delete_by_schedule(schedule_id)
            return

        fields = {
            "horse_name": horse.name,
            "meal_description": horse.post_training_meal,
            "end_time": end_time,
            "date": day,
        }
        if task is None:
            await self.feeding_repo.create({"schedule_id": schedule_id, **fields})
        else:
            await self.feeding_repo.update(task.id, fields)

    async def _require_user(self, user_id: int, label: str) -> User:
        user = await self.user_repo.get(user_id)
        if user is None:
            raise RecordNotFound(label, user_id)
        return user

    def to_response(self, schedule: Schedule) -> ScheduleResponse:
        """Convert Schedule model to ScheduleResponse."""
        horse: Horse | None = schedule.horse
        return ScheduleResponse(
            id=schedule.id,
            horse_id=schedule.horse_id,
            rider_id=schedule.rider_id,
            trainer_id=schedule.trainer_id,
            date=schedule.date,
            start_time=schedule.start_time,
            end_time=schedule.end_time,
            duration=schedule.duration,
            status=schedule.status,
            price=schedule.price,
            paid=schedule.paid,
            notes=schedule.notes,
            feeding_done=schedule.feeding_done,
            created_at=schedule.created_at,
            updated_at=schedule.updated_at,
            horse_name=horse.name if horse else None,
            horse_level=horse.level if horse else None,
            rider_name=schedule.rider.name if schedule.rider else None,
            rider_level=schedule.rider.level if schedule.rider else None,
            trainer_name=schedule.trainer.name if schedule.trainer else None,
        )
