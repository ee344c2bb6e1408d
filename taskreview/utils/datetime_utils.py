"""Date and time utilities."""

from datetime import date, datetime, time, timedelta
from typing import List, Optional, Tuple

WEEKDAY_LABELS: List[str] = ['Mon', 'Tue', 'Wed', 'Thu', 'Fri', 'Sat', 'Sun']

SECONDS_PER_DAY = 24 * 60 * 60


def weekday_label(day: date) -> str:
    """Get the short English name of a date's weekday."""
    return WEEKDAY_LABELS[day.weekday()]


def span_days(start: datetime, end: datetime) -> int:
    """Get the number of whole days between two timestamps, truncated toward zero."""
    return int((end - start).total_seconds() / SECONDS_PER_DAY)


def parse_clock(value: Optional[str], fmt: str = '%H:%M') -> Optional[time]:
    """Parse a wall-clock string, returning None when empty or malformed."""
    if not value:
        return None
    try:
        return datetime.strptime(value.strip(), fmt).time()
    except ValueError:
        return None


def clock_to_timedelta(value: time) -> timedelta:
    """Convert a clock reading such as 01:30 into the duration since midnight."""
    return timedelta(hours=value.hour, minutes=value.minute, seconds=value.second)


def combine_with_rollover(day: date, begin: time, end: time) -> Tuple[datetime, datetime]:
    """Attach clock readings to a date, moving the end to the next day when it wraps midnight."""
    begin_time = datetime.combine(day, begin)
    end_time = datetime.combine(day, end)
    if end < begin:
        end_time += timedelta(days=1)
    return begin_time, end_time
