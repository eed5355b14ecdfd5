"""Timezone resolution and hour-of-day bucketing."""

import logging
from datetime import datetime, timezone
from functools import lru_cache
from zoneinfo import ZoneInfo, ZoneInfoNotFoundError

from readpulse.config import DEFAULT_TIMEZONE
from readpulse.errors import ConfigurationError

logger = logging.getLogger(__name__)


@lru_cache(maxsize=128)
def get_zone(tz_name: str) -> ZoneInfo:
    try:
        return ZoneInfo(tz_name)
    except (ZoneInfoNotFoundError, ValueError) as exc:
        logger.error("Unknown timezone identifier: %r", tz_name)
        raise ConfigurationError(f"Unknown timezone: {tz_name}") from exc


def resolve_timezone(tz_name: str | None) -> str:
    """Substitute the default zone for an unset identifier."""
    return tz_name or DEFAULT_TIMEZONE


def to_utc(value: datetime) -> datetime:
    """Normalize an instant to aware UTC. Naive values are taken as UTC."""
    if value.tzinfo is None:
        return value.replace(tzinfo=timezone.utc)
    return value.astimezone(timezone.utc)


def hour_of_day(value: datetime, tz_name: str) -> int:
    """Local wall-clock hour (0-23) of an instant in the given IANA zone.

    Converting an absolute instant to local time is never ambiguous, so DST
    gaps and folds need no tie-break here: the instant maps to exactly one
    local reading, whatever offset was in force at that moment.
    """
    return to_utc(value).astimezone(get_zone(tz_name)).hour
