"""Horse welfare checks for proposed riding sessions.

A booking is checked against three rules for the horse's day:

* daily workload: total booked minutes may not exceed the horse's cap;
* exclusivity: Scheduled sessions may not overlap ([start, end) intervals);
* required rest: once a horse has worked 120 consecutive minutes, the next
  session must start at least ``required_rest_minutes`` after the previous
  one ended.

Every rule runs on every call so the caller can show all problems at once.
Rule violations are returned as data in ValidationResult, never raised.
"""

import datetime
from dataclasses import dataclass, field
from typing import TYPE_CHECKING, Protocol

import structlog

from app.scheduling.time_utils import (
    MINUTES_PER_DAY,
    add_minutes,
    is_clock_time,
    minutes_between,
    to_minutes,
)

if TYPE_CHECKING:
    from app.models import Horse, Schedule

logger = structlog.get_logger(__name__)

CONTINUOUS_WORK_THRESHOLD_MINUTES = 120

HORSE_NOT_FOUND = "Horse not found"


@dataclass
class ValidationResult:
    """Outcome of a welfare check."""

    valid: bool = True
    errors: list[str] = field(default_factory=list)
    warnings: list[str] = field(default_factory=list)

    def add_error(self, message: str) -> None:
        self.errors.append(message)
        self.valid = False

    def add_warning(self, message: str) -> None:
        self.warnings.append(message)


@dataclass
class Candidate:
    """A proposed session that has not been stored yet."""

    horse_id: int
    date: datetime.date
    start_time: str
    duration: int
    exclude_id: int | None = None

    def __post_init__(self) -> None:
        if isinstance(self.date, datetime.datetime):
            self.date = self.date.date()
        if isinstance(self.duration, bool) or not isinstance(self.duration, int):
            raise ValueError(f"duration must be an integer number of minutes, got {self.duration!r}")
        if self.duration <= 0:
            raise ValueError(f"duration must be positive, got {self.duration}")
        if not is_clock_time(self.start_time):
            raise ValueError(f"start_time must be HH:MM between 00:00 and 23:59, got {self.start_time!r}")

    @property
    def end_time(self) -> str:
        return add_minutes(self.start_time, self.duration)


@dataclass(frozen=True)
class Slot:
    start_time: str
    duration: int

    @property
    def end_time(self) -> str:
        return add_minutes(self.start_time, self.duration)


class WelfareStore(Protocol):
    """Read access the validator needs. Scoped to one horse and one day."""

    async def get_horse(self, horse_id: int) -> "Horse | None":
        ...

    async def get_sessions_for_horse_on_date(
        self,
        horse_id: int,
        day: datetime.date,
        exclude_id: int | None = None,
    ) -> "list[Schedule]":
        """Scheduled sessions only, ordered by start time."""
        ...


class WelfareValidator:
    """Decides whether a session may be booked for a horse."""

    def __init__(self, store: WelfareStore):
        self.store = store

    async def validate(
        self,
        horse_id: int,
        day: datetime.date,
        start_time: str,
        duration: int,
        exclude_session_id: int | None = None,
    ) -> ValidationResult:
        """
        Check a proposed session against the horse's welfare limits.

        Args:
            horse_id: Horse to book
            day: Calendar day of the session
            start_time: "HH:MM", 00:00-23:59
            duration: Length in minutes, > 0
            exclude_session_id: Session being edited, ignored by every check

        Returns:
            ValidationResult with one error per violated rule

        Raises:
            ValueError: if the arguments break the preconditions above
        """
        candidate = Candidate(
            horse_id=horse_id,
            date=day,
            start_time=start_time,
            duration=duration,
            exclude_id=exclude_session_id,
        )
        return await self.check(candidate)

    async def check(self, candidate: Candidate) -> ValidationResult:
        """Run all checks for an already-built candidate."""
        result = ValidationResult()

        horse = await self.store.get_horse(candidate.horse_id)
        if horse is None:
            result.add_error(HORSE_NOT_FOUND)
            return result

        sessions = await self.store.get_sessions_for_horse_on_date(
            candidate.horse_id, candidate.date, exclude_id=candidate.exclude_id
        )
        existing = [Slot(s.start_time, s.duration) for s in sessions]

        check_workload(horse.max_work_minutes_per_day, existing, candidate, result)
        check_overlap(existing, candidate, result)
        check_rest(horse.required_rest_minutes, existing, candidate, result)
        check_day_boundary(candidate, result)

        log = logger.bind(
            horse_id=candidate.horse_id,
            date=candidate.date.isoformat(),
            start_time=candidate.start_time,
            duration=candidate.duration,
        )
        if result.valid:
            log.debug("welfare_validation_passed", existing_sessions=len(existing))
        else:
            log.info("welfare_validation_failed", errors=result.errors)
        return result


def check_workload(
    max_minutes: int,
    existing: list[Slot],
    candidate: Candidate,
    result: ValidationResult,
) -> None:
    """The day's total, candidate included, may reach but not pass the cap."""
    existing_minutes = sum(s.duration for s in existing)
    new_total = existing_minutes + candidate.duration
    if new_total > max_minutes:
        result.add_error(
            "Horse would exceed daily work limit. "
            f"Current: {existing_minutes}min, New: {candidate.duration}min, Max: {max_minutes}min"
        )


def check_overlap(
    existing: list[Slot],
    candidate: Candidate,
    result: ValidationResult,
) -> None:
    """Report the first existing session whose interval meets the candidate's."""
    start = to_minutes(candidate.start_time)
    end = start + candidate.duration
    for slot in existing:
        other_start = to_minutes(slot.start_time)
        other_end = other_start + slot.duration
        if start < other_end and other_start < end:
            result.add_error(
                f"Session {candidate.start_time}-{candidate.end_time} overlaps "
                f"existing session {slot.start_time}-{slot.end_time}"
            )
            return


def check_rest(
    required_rest: int,
    existing: list[Slot],
    candidate: Candidate,
    result: ValidationResult,
) -> None:
    """Walk the day in start order and enforce rest after long stretches.

    A break only restarts the work clock when it lasts the full required rest.
    """
    # sorted() is stable: on equal starts existing sessions come first
    day = sorted(
        [*existing, Slot(candidate.start_time, candidate.duration)],
        key=lambda s: to_minutes(s.start_time),
    )

    consecutive = 0
    last_end: str | None = None
    for slot in day:
        if last_end is not None:
            break_minutes = minutes_between(last_end, slot.start_time)
            if break_minutes < required_rest and consecutive >= CONTINUOUS_WORK_THRESHOLD_MINUTES:
                result.add_error(
                    f"Horse needs {required_rest}min rest after "
                    f"{CONTINUOUS_WORK_THRESHOLD_MINUTES}min of work. "
                    f"Only {break_minutes}min break detected."
                )
            if break_minutes >= required_rest:
                consecutive = 0
        consecutive += slot.duration
        last_end = slot.end_time


def check_day_boundary(candidate: Candidate, result: ValidationResult) -> None:
    """Sessions are single-day; an end after 24:00 is refused."""
    if to_minutes(candidate.start_time) + candidate.duration > MINUTES_PER_DAY:
        result.add_error(
            f"Session must end by 24:00 (starts {candidate.start_time}, "
            f"ends {candidate.end_time})"
        )
