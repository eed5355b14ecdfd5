"""Derive and validate reading sessions before they are stored."""

import logging
from dataclasses import dataclass
from datetime import datetime
from typing import TYPE_CHECKING

from readpulse.errors import ForbiddenError, NotFoundError, ValidationError
from readpulse.metrics import duration_seconds, pages_read
from readpulse.timezones import to_utc

if TYPE_CHECKING:
    from readpulse.services.repository import SessionRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class SessionInput:
    book_id: int
    start_page: int
    end_page: int
    start_time: datetime
    end_time: datetime


@dataclass(frozen=True)
class BookBound:
    """The parts of a book that session validation reads."""

    total_pages: int
    owner_id: int


@dataclass(frozen=True)
class SessionRecord:
    book_id: int
    start_page: int
    end_page: int
    start_time: datetime
    end_time: datetime
    duration_seconds: int
    pages_read: int
    id: int | None = None


def derive_session(
    data: SessionInput,
    book: BookBound | None,
    requesting_user_id: int,
) -> SessionRecord:
    """Validate a session request against its book and compute derived fields.

    Raises ValidationError for reversed page or time ranges and for an end
    page past the book's last page, NotFoundError when the book is missing
    and ForbiddenError when the requester does not own it.
    """
    start = to_utc(data.start_time)
    end = to_utc(data.end_time)

    if data.end_page <= data.start_page:
        raise ValidationError(
            f"End page ({data.end_page}) must be greater than start page ({data.start_page})"
        )
    if end <= start:
        raise ValidationError("End time must be after start time")

    if book is None:
        raise NotFoundError("Book", {"book_id": data.book_id})

    if book.owner_id != requesting_user_id:
        logger.warning(
            "User %s attempted to log a session on book %s owned by %s",
            requesting_user_id, data.book_id, book.owner_id,
        )
        raise ForbiddenError("You do not have access to this book")

    if data.end_page > book.total_pages:
        raise ValidationError(
            f"End page ({data.end_page}) cannot exceed book's total pages ({book.total_pages})",
            {"end_page": data.end_page, "total_pages": book.total_pages},
        )

    return SessionRecord(
        book_id=data.book_id,
        start_page=data.start_page,
        end_page=data.end_page,
        start_time=start,
        end_time=end,
        duration_seconds=duration_seconds(start, end),
        pages_read=pages_read(data.start_page, data.end_page),
    )


async def create_session(
    repo: "SessionRepository",
    data: SessionInput,
    requesting_user_id: int,
) -> SessionRecord:
    book = await repo.find_book_by_id(data.book_id)
    record = derive_session(data, book, requesting_user_id)
    stored = await repo.persist(record)
    logger.debug(
        "Stored session %s on book %s: %d pages in %ds",
        stored.id, stored.book_id, stored.pages_read, stored.duration_seconds,
    )
    return stored
