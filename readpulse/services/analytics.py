"""Reading-speed analytics over an already-scoped list of sessions.

Each view is a pure reducer: callers fetch and filter the sessions (owner,
book, date range, limit) and hand the result set over. Nothing here touches
the database or keeps state between calls.
"""

import math
from collections.abc import Sequence
from dataclasses import dataclass, field
from datetime import datetime
from typing import Literal

from readpulse.config import RECENT_WINDOW_FRACTION, SPEED_TREND_THRESHOLD
from readpulse.metrics import reading_speed, round_half_up
from readpulse.timezones import hour_of_day, resolve_timezone, to_utc

Trend = Literal["increasing", "decreasing", "stable"]


@dataclass(frozen=True)
class SessionSample:
    """One stored session joined with its owner's timezone."""

    pages_read: int
    duration_seconds: int
    start_time: datetime
    timezone: str | None = None


@dataclass
class HourBucket:
    hour: int
    average_speed: int
    total_pages: int
    total_duration: int
    session_count: int


@dataclass
class HourlySpeed:
    speed_by_hour: list[HourBucket] = field(default_factory=list)
    total_sessions: int = 0


@dataclass
class Velocity:
    average_speed: int = 0
    recent_speed: int = 0
    velocity_change: int = 0
    trend: Trend = "stable"
    # None for an empty result set
    total_sessions: int | None = None


@dataclass
class Summary:
    total_sessions: int
    total_books: int
    total_pages_read: int
    total_reading_time: int
    average_speed: int
    average_session_duration: int


def _totals(sessions: Sequence[SessionSample]) -> tuple[int, int]:
    pages = sum(s.pages_read for s in sessions)
    seconds = sum(s.duration_seconds for s in sessions)
    return pages, seconds


def hourly_speed(sessions: Sequence[SessionSample]) -> HourlySpeed:
    """Average speed per local hour-of-day in which sessions started."""
    buckets: dict[int, list[int]] = {}
    for s in sessions:
        hour = hour_of_day(s.start_time, resolve_timezone(s.timezone))
        acc = buckets.setdefault(hour, [0, 0, 0])
        acc[0] += s.pages_read
        acc[1] += s.duration_seconds
        acc[2] += 1

    rows = [
        HourBucket(
            hour=hour,
            average_speed=reading_speed(pages, seconds),
            total_pages=pages,
            total_duration=seconds,
            session_count=count,
        )
        for hour, (pages, seconds, count) in sorted(buckets.items())
    ]
    return HourlySpeed(speed_by_hour=rows, total_sessions=len(sessions))


def recent_window_size(count: int) -> int:
    return max(1, math.floor(count * RECENT_WINDOW_FRACTION))


def classify_trend(change: int) -> Trend:
    if change > SPEED_TREND_THRESHOLD:
        return "increasing"
    if change < -SPEED_TREND_THRESHOLD:
        return "decreasing"
    return "stable"


def velocity(sessions: Sequence[SessionSample]) -> Velocity:
    """Compare the most recent sessions' speed against the overall average.

    The recent window is the last 30% of sessions by start time, never
    fewer than one.
    """
    if not sessions:
        return Velocity()

    ordered = sorted(sessions, key=lambda s: to_utc(s.start_time))
    average = reading_speed(*_totals(ordered))
    recent = reading_speed(*_totals(ordered[-recent_window_size(len(ordered)):]))
    change = recent - average

    return Velocity(
        average_speed=average,
        recent_speed=recent,
        velocity_change=change,
        trend=classify_trend(change),
        total_sessions=len(ordered),
    )


def summary(sessions: Sequence[SessionSample], book_count: int) -> Summary:
    """Overall totals. book_count comes from the caller so books without
    sessions still count."""
    pages, seconds = _totals(sessions)
    count = len(sessions)
    return Summary(
        total_sessions=count,
        total_books=book_count,
        total_pages_read=pages,
        total_reading_time=seconds,
        average_speed=reading_speed(pages, seconds),
        average_session_duration=round_half_up(seconds / count) if count else 0,
    )
