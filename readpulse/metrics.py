"""Pure conversions from raw page and time deltas to reading metrics."""

import math
from datetime import datetime

from readpulse.config import SECONDS_PER_HOUR


def round_half_up(value: float) -> int:
    """Round to the nearest integer, halves going up (e.g. 2.5 -> 3)."""
    return math.floor(value + 0.5)


def duration_seconds(start: datetime, end: datetime) -> int:
    """Whole seconds between two instants, truncated toward zero."""
    return int((end - start).total_seconds())


def pages_read(start_page: int, end_page: int) -> int:
    return end_page - start_page


def reading_speed(pages: int, seconds: int) -> int:
    """Pages per hour, or 0 when no time elapsed."""
    if seconds == 0:
        return 0
    return round_half_up(pages / seconds * SECONDS_PER_HOUR)


def format_speed(pages: int, seconds: int) -> str:
    return f"{reading_speed(pages, seconds)} pages/hour"
