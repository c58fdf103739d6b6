"""Business logic services."""

from app.services.feeding_service import FeedingService
from app.services.schedule_service import ScheduleService, level_mismatch_warning

__all__ = [
    "ScheduleService",
    "FeedingService",
    "level_mismatch_warning",
]
