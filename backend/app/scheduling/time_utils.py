"""Wall-clock arithmetic on "HH:MM" strings.

Times are minute-granular and carry no date. Sessions are expected to stay
within a single day, so nothing here rolls over at midnight.
"""

import re

_TIME_RE = re.compile(r"^(\d{2}):(\d{2})$")

MINUTES_PER_DAY = 24 * 60


def parse_time(value: str) -> tuple[int, int]:
    """
    Split an "HH:MM" string into (hours, minutes).

    Hours may exceed 23 so that end times produced by add_minutes can be
    parsed back.

    Raises:
        ValueError: if the string is not two-digit hours and minutes or the
            minute component is out of range.
    """
    match = _TIME_RE.match(value or "")
    if match is None:
        raise ValueError(f"Invalid time {value!r}, expected HH:MM")
    hours, minutes = int(match.group(1)), int(match.group(2))
    if minutes > 59:
        raise ValueError(f"Invalid time {value!r}, minutes must be 00-59")
    return hours, minutes


def to_minutes(value: str) -> int:
    """Minutes since 00:00."""
    hours, minutes = parse_time(value)
    return hours * 60 + minutes


def is_clock_time(value: str) -> bool:
    """True for a start time inside the day (00:00..23:59)."""
    try:
        hours, _ = parse_time(value)
    except ValueError:
        return False
    return hours <= 23


def format_minutes(total: int) -> str:
    hours, minutes = divmod(total, 60)
    return f"{hours:02d}:{minutes:02d}"


def add_minutes(time: str, minutes: int) -> str:
    """
    Add minutes to a time.

    The result is not clamped: 23:30 + 60 gives "24:30".
    """
    return format_minutes(to_minutes(time) + minutes)


def minutes_between(start: str, end: str) -> int:
    """Minutes from start to end. Negative if end precedes start."""
    return to_minutes(end) - to_minutes(start)
