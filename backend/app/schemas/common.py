"""Common schema types."""

from datetime import datetime
from enum import Enum

from pydantic import BaseModel, ConfigDict

# 24-hour HH:MM inside one day
TIME_PATTERN = r"^([01]\d|2[0-3]):[0-5]\d$"


class SkillLevelEnum(str, Enum):
    """Skill level enum for horses and riders."""

    BEGINNER = "BEGINNER"
    INTERMEDIATE = "INTERMEDIATE"
    ADVANCED = "ADVANCED"


class RoleEnum(str, Enum):
    """User role enum."""

    ADMIN = "ADMIN"
    TRAINER = "TRAINER"
    RIDER = "RIDER"
    STABLE_HAND = "STABLE_HAND"


class PaymentMethodEnum(str, Enum):
    """Rider payment method enum."""

    SINGLE = "SINGLE"
    SUBSCRIPTION = "SUBSCRIPTION"


class ScheduleStatusEnum(str, Enum):
    """Schedule status enum."""

    SCHEDULED = "SCHEDULED"
    COMPLETED = "COMPLETED"


class BaseSchema(BaseModel):
    """Base schema with common configuration."""

    model_config = ConfigDict(from_attributes=True)


class TimestampSchema(BaseSchema):
    """Schema with timestamp fields."""

    created_at: datetime
    updated_at: datetime
