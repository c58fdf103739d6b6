"""Horse schemas."""

from pydantic import Field

from app.config import get_settings
from app.schemas.common import BaseSchema, SkillLevelEnum, TimestampSchema


# A cap below one minute would round to a zero-minute day
MIN_WORK_HOURS = 1 / 60


def _default_max_work_hours() -> float:
    return get_settings().default_max_work_hours


def _default_rest_after_work() -> float:
    return get_settings().default_rest_after_work


class HorseBase(BaseSchema):
    """Base horse schema."""

    name: str = Field(..., min_length=1, max_length=50, description="Horse name")
    breed: str | None = Field(None, max_length=100, description="Breed")
    level: SkillLevelEnum = Field(..., description="Rider level the horse suits")
    max_work_hours: float = Field(
        default_factory=_default_max_work_hours,
        ge=MIN_WORK_HOURS,
        le=24,
        description="Daily work cap (hours)",
    )
    rest_after_work: float = Field(
        default_factory=_default_rest_after_work,
        ge=0,
        le=24,
        description="Rest required after 2h continuous work (hours)",
    )
    post_training_meal: str | None = Field(None, description="Meal served after a ride")
    notes: str | None = Field(None, description="Free-form notes")


class HorseCreate(HorseBase):
    """Schema for creating a horse."""

    pass


class HorseUpdate(BaseSchema):
    """Schema for updating a horse."""

    name: str | None = Field(None, min_length=1, max_length=50)
    breed: str | None = Field(None, max_length=100)
    level: SkillLevelEnum | None = None
    max_work_hours: float | None = Field(None, ge=MIN_WORK_HOURS, le=24)
    rest_after_work: float | None = Field(None, ge=0, le=24)
    post_training_meal: str | None = None
    notes: str | None = None
    is_active: bool | None = None


class HorseResponse(HorseBase, TimestampSchema):
    """Horse response schema."""

    id: int
    is_active: bool
    max_work_minutes_per_day: int
    required_rest_minutes: int


class HorseListResponse(BaseSchema):
    """Horse list response schema."""

    items: list[HorseResponse]
    total: int
