from datetime import UTC, datetime, timedelta, timezone

import pytest

from readpulse.errors import ConfigurationError
from readpulse.timezones import get_zone, hour_of_day, resolve_timezone, to_utc


def test_hour_of_day_utc():
    assert hour_of_day(datetime(2025, 3, 1, 9, 15, tzinfo=UTC), "UTC") == 9


def test_hour_of_day_half_hour_offset():
    # 03:45 UTC is 09:15 in Kolkata (UTC+5:30)
    assert hour_of_day(datetime(2025, 3, 1, 3, 45, tzinfo=UTC), "Asia/Kolkata") == 9
    # 03:29 UTC is 08:59
    assert hour_of_day(datetime(2025, 3, 1, 3, 29, tzinfo=UTC), "Asia/Kolkata") == 8


def test_hour_of_day_wraps_past_midnight():
    assert hour_of_day(datetime(2025, 3, 1, 20, 0, tzinfo=UTC), "Asia/Kolkata") == 1


def test_hour_of_day_naive_is_utc():
    assert hour_of_day(datetime(2025, 3, 1, 9, 0), "UTC") == 9


def test_hour_of_day_converts_aware_input():
    ist = timezone(timedelta(hours=5, minutes=30))
    assert hour_of_day(datetime(2025, 3, 1, 9, 0, tzinfo=ist), "UTC") == 3


def test_hour_of_day_spring_forward():
    # New York skips 02:00-03:00 on 2025-03-09; 07:00 UTC is 03:00 EDT
    assert hour_of_day(datetime(2025, 3, 9, 6, 59, tzinfo=UTC), "America/New_York") == 1
    assert hour_of_day(datetime(2025, 3, 9, 7, 0, tzinfo=UTC), "America/New_York") == 3


def test_hour_of_day_fall_back():
    # 01:xx happens twice on 2025-11-02 in New York
    assert hour_of_day(datetime(2025, 11, 2, 5, 30, tzinfo=UTC), "America/New_York") == 1
    assert hour_of_day(datetime(2025, 11, 2, 6, 30, tzinfo=UTC), "America/New_York") == 1
    assert hour_of_day(datetime(2025, 11, 2, 7, 30, tzinfo=UTC), "America/New_York") == 2


def test_hour_of_day_always_in_range():
    start = datetime(2025, 1, 1, tzinfo=UTC)
    for tz_name in ("UTC", "Asia/Kolkata", "America/New_York", "Australia/Lord_Howe", "Asia/Kathmandu"):
        for step in range(0, 24 * 365, 7):
            assert 0 <= hour_of_day(start + timedelta(hours=step, minutes=step % 60), tz_name) <= 23


def test_unknown_timezone_raises():
    with pytest.raises(ConfigurationError, match="Mars/Olympus_Mons"):
        hour_of_day(datetime(2025, 3, 1, tzinfo=UTC), "Mars/Olympus_Mons")


def test_get_zone_rejects_empty_name():
    with pytest.raises(ConfigurationError):
        get_zone("")


def test_resolve_timezone_default():
    assert resolve_timezone(None) == "Asia/Kolkata"
    assert resolve_timezone("") == "Asia/Kolkata"
    assert resolve_timezone("Europe/Berlin") == "Europe/Berlin"


def test_to_utc():
    assert to_utc(datetime(2025, 3, 1, 9, 0)) == datetime(2025, 3, 1, 9, 0, tzinfo=UTC)
    ist = timezone(timedelta(hours=5, minutes=30))
    assert to_utc(datetime(2025, 3, 1, 9, 0, tzinfo=ist)).hour == 3
