"""Tests for validating session requests and computing derived fields."""

from datetime import UTC, datetime, timedelta, timezone

import pytest

from readpulse.errors import ForbiddenError, NotFoundError, ValidationError
from readpulse.metrics import reading_speed
from readpulse.services.sessions import BookBound, SessionInput, derive_session

T = datetime(2025, 3, 1, 20, 0, tzinfo=UTC)
OWNER = 1
BOOK = BookBound(total_pages=100, owner_id=OWNER)


def _input(**overrides) -> SessionInput:
    fields = dict(book_id=7, start_page=10, end_page=95, start_time=T, end_time=T + timedelta(seconds=1800))
    fields.update(overrides)
    return SessionInput(**fields)


def test_derives_duration_and_pages():
    record = derive_session(_input(), BOOK, OWNER)
    assert record.duration_seconds == 1800
    assert record.pages_read == 85
    assert reading_speed(record.pages_read, record.duration_seconds) == 170
    assert record.book_id == 7
    assert record.start_page == 10
    assert record.end_page == 95
    assert record.id is None


def test_end_page_may_equal_total_pages():
    record = derive_session(_input(end_page=100), BOOK, OWNER)
    assert record.pages_read == 90


def test_normalizes_times_to_utc():
    ist = timezone(timedelta(hours=5, minutes=30))
    start = datetime(2025, 3, 1, 9, 0, tzinfo=ist)
    record = derive_session(_input(start_time=start, end_time=start + timedelta(hours=1)), BOOK, OWNER)
    assert record.start_time == datetime(2025, 3, 1, 3, 30, tzinfo=UTC)
    assert record.duration_seconds == 3600


def test_rejects_end_page_beyond_book():
    with pytest.raises(ValidationError) as exc_info:
        derive_session(_input(end_page=150), BOOK, OWNER)
    assert "150" in exc_info.value.message
    assert "100" in exc_info.value.message
    assert exc_info.value.details == {"end_page": 150, "total_pages": 100}


@pytest.mark.parametrize("end_page", [10, 5])
def test_rejects_non_increasing_pages(end_page):
    with pytest.raises(ValidationError):
        derive_session(_input(end_page=end_page), BOOK, OWNER)


@pytest.mark.parametrize("offset", [timedelta(0), timedelta(seconds=-1)])
def test_rejects_non_increasing_times(offset):
    with pytest.raises(ValidationError):
        derive_session(_input(end_time=T + offset), BOOK, OWNER)


def test_rejects_missing_book():
    with pytest.raises(NotFoundError) as exc_info:
        derive_session(_input(), None, OWNER)
    assert exc_info.value.message == "Book not found"


def test_rejects_foreign_book():
    with pytest.raises(ForbiddenError):
        derive_session(_input(), BOOK, requesting_user_id=2)


def test_ordering_checked_before_book_lookup():
    # A reversed range is rejected even when the book is missing
    with pytest.raises(ValidationError):
        derive_session(_input(end_page=1), None, OWNER)
