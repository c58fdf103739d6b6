"""Feeding task schemas."""

import datetime

from app.schemas.common import BaseSchema, TimestampSchema


class FeedingTaskResponse(TimestampSchema):
    """Feeding task response schema."""

    id: int
    schedule_id: int | None = None
    horse_name: str
    end_time: str
    meal_description: str
    date: datetime.date
    completed: bool
    completed_at: datetime.datetime | None = None
    completed_by: str | None = None


class FeedingTaskListResponse(BaseSchema):
    """Feeding task list response schema."""

    items: list[FeedingTaskResponse]
    total: int


class FeedingCompleteRequest(BaseSchema):
    """Who fed the horse."""

    completed_by: str | None = None


class FeedingGenerateResponse(BaseSchema):
    """Tasks created by a generation run."""

    message: str
    tasks: list[FeedingTaskResponse]
