"""Data access repositories."""

from app.repositories.base import BaseRepository
from app.repositories.feeding_repository import FeedingTaskRepository
from app.repositories.horse_repository import HorseRepository
from app.repositories.schedule_repository import ScheduleRepository
from app.repositories.user_repository import UserRepository
from app.repositories.welfare_store import SqlWelfareStore

__all__ = [
    "BaseRepository",
    "HorseRepository",
    "UserRepository",
    "ScheduleRepository",
    "FeedingTaskRepository",
    "SqlWelfareStore",
]
