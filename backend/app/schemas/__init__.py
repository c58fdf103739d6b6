"""Pydantic schemas."""

from app.schemas.common import (
    TIME_PATTERN,
    BaseSchema,
    PaymentMethodEnum,
    RoleEnum,
    ScheduleStatusEnum,
    SkillLevelEnum,
    TimestampSchema,
)
from app.schemas.feeding import (
    FeedingCompleteRequest,
    FeedingGenerateResponse,
    FeedingTaskListResponse,
    FeedingTaskResponse,
)
from app.schemas.horse import (
    HorseCreate,
    HorseListResponse,
    HorseResponse,
    HorseUpdate,
)
from app.schemas.schedule import (
    ScheduleBookingResponse,
    ScheduleCompleteResponse,
    ScheduleCreate,
    ScheduleListResponse,
    ScheduleResponse,
    ScheduleUpdate,
    WelfareCheckRequest,
    WelfareCheckResponse,
)
from app.schemas.user import (
    UserCreate,
    UserListResponse,
    UserResponse,
    UserUpdate,
)

__all__ = [
    # Common
    "TIME_PATTERN",
    "BaseSchema",
    "TimestampSchema",
    "SkillLevelEnum",
    "RoleEnum",
    "PaymentMethodEnum",
    "ScheduleStatusEnum",
    # Horse
    "HorseCreate",
    "HorseUpdate",
    "HorseResponse",
    "HorseListResponse",
    # User
    "UserCreate",
    "UserUpdate",
    "UserResponse",
    "UserListResponse",
    # Schedule
    "ScheduleCreate",
    "ScheduleUpdate",
    "ScheduleResponse",
    "ScheduleListResponse",
    "ScheduleBookingResponse",
    "ScheduleCompleteResponse",
    "WelfareCheckRequest",
    "WelfareCheckResponse",
    # Feeding
    "FeedingTaskResponse",
    "FeedingTaskListResponse",
    "FeedingCompleteRequest",
    "FeedingGenerateResponse",
]
