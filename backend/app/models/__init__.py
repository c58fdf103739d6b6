"""SQLAlchemy models."""

from app.models.feeding import FeedingTask
from app.models.horse import Horse, SkillLevel
from app.models.schedule import Schedule, ScheduleStatus
from app.models.user import PaymentMethod, Role, User

__all__ = [
    "Horse",
    "User",
    "Schedule",
    "FeedingTask",
    "SkillLevel",
    "Role",
    "PaymentMethod",
    "ScheduleStatus",
]
