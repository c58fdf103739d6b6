"""Schedule schemas."""

import datetime

from pydantic import Field

from app.schemas.common import BaseSchema, ScheduleStatusEnum, TIME_PATTERN, TimestampSchema


class ScheduleBase(BaseSchema):
    """Base schedule schema."""

    horse_id: int = Field(..., description="Horse ID")
    rider_id: int = Field(..., description="Rider (user) ID")
    trainer_id: int = Field(..., description="Trainer (user) ID")
    date: datetime.date = Field(..., description="Calendar day of the ride")
    start_time: str = Field(..., pattern=TIME_PATTERN, description="Start, HH:MM")
    duration: int = Field(..., gt=0, le=24 * 60, description="Length in minutes")
    price: float | None = Field(None, ge=0)
    paid: bool = False
    notes: str | None = None


class ScheduleCreate(ScheduleBase):
    """Schema for booking a session."""

    pass


class ScheduleUpdate(BaseSchema):
    """Schema for editing a session."""

    horse_id: int | None = None
    rider_id: int | None = None
    trainer_id: int | None = None
    date: datetime.date | None = None
    start_time: str | None = Field(None, pattern=TIME_PATTERN)
    duration: int | None = Field(None, gt=0, le=24 * 60)
    status: ScheduleStatusEnum | None = None
    price: float | None = Field(None, ge=0)
    paid: bool | None = None
    notes: str | None = None


class ScheduleResponse(ScheduleBase, TimestampSchema):
    """Schedule response schema."""

    id: int
    end_time: str
    status: ScheduleStatusEnum
    feeding_done: bool = False

    # Nested objects
    horse_name: str | None = None
    horse_level: str | None = None
    rider_name: str | None = None
    rider_level: str | None = None
    trainer_name: str | None = None


class ScheduleListResponse(BaseSchema):
    """Schedule list response schema."""

    items: list[ScheduleResponse]
    total: int


class ScheduleBookingResponse(BaseSchema):
    """A stored booking plus the advisory warnings raised while booking it."""

    schedule: ScheduleResponse
    warnings: list[str] = Field(default_factory=list)


class WelfareCheckRequest(BaseSchema):
    """Pre-submit welfare check for a proposed session."""

    horse_id: int
    date: datetime.date
    start_time: str = Field(..., pattern=TIME_PATTERN)
    duration: int = Field(..., gt=0, le=24 * 60)
    rider_id: int | None = Field(None, description="Adds a level mismatch warning when given")
    schedule_id: int | None = Field(None, description="Session being edited")


class WelfareCheckResponse(BaseSchema):
    """Welfare check result."""

    valid: bool
    errors: list[str] = Field(default_factory=list)
    warnings: list[str] = Field(default_factory=list)


class ScheduleCompleteResponse(BaseSchema):
    """Result of marking a session completed."""

    message: str
    deducted_hours: float | None = None
    remaining_hours: float | None = None
