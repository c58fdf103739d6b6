"""Welfare-constrained scheduling rules."""

from app.scheduling.time_utils import add_minutes, minutes_between, parse_time, to_minutes
from app.scheduling.welfare import (
    CONTINUOUS_WORK_THRESHOLD_MINUTES,
    Candidate,
    ValidationResult,
    WelfareStore,
    WelfareValidator,
)

__all__ = [
    "add_minutes",
    "minutes_between",
    "parse_time",
    "to_minutes",
    "CONTINUOUS_WORK_THRESHOLD_MINUTES",
    "Candidate",
    "ValidationResult",
    "WelfareStore",
    "WelfareValidator",
]
