"""SQLAlchemy-backed persistence for the session and analytics core."""

from dataclasses import dataclass, replace
from datetime import datetime

from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from readpulse.errors import ConflictError
from readpulse.id import make_id
from readpulse.models import Book, ReadingSession, User
from readpulse.services.analytics import SessionSample
from readpulse.services.sessions import BookBound, SessionRecord
from readpulse.timezones import to_utc


@dataclass(frozen=True)
class AnalyticsScope:
    owner_id: int
    book_id: int | None = None
    start_date: datetime | None = None
    end_date: datetime | None = None


def _naive_utc(value: datetime) -> datetime:
    return to_utc(value).replace(tzinfo=None)


class SessionRepository:
    def __init__(self, session: AsyncSession) -> None:
        self.session = session

    async def find_book_by_id(self, book_id: int) -> BookBound | None:
        row = (
            await self.session.execute(
                select(Book.total_pages, Book.user_id).where(Book.id == book_id)
            )
        ).one_or_none()
        if row is None:
            return None
        return BookBound(total_pages=row.total_pages, owner_id=row.user_id)

    async def list_sessions(
        self,
        scope: AnalyticsScope,
        limit: int | None = None,
        newest_first: bool = False,
    ) -> list[SessionSample]:
        stmt = (
            select(
                ReadingSession.pages_read,
                ReadingSession.duration_seconds,
                ReadingSession.start_time,
                User.timezone,
            )
            .join(Book, ReadingSession.book_id == Book.id)
            .join(User, Book.user_id == User.id)
            .where(Book.user_id == scope.owner_id)
        )
        if scope.book_id is not None:
            stmt = stmt.where(Book.id == scope.book_id)
        if scope.start_date is not None:
            stmt = stmt.where(ReadingSession.start_time >= _naive_utc(scope.start_date))
        if scope.end_date is not None:
            stmt = stmt.where(ReadingSession.start_time <= _naive_utc(scope.end_date))
        order = ReadingSession.start_time.desc() if newest_first else ReadingSession.start_time.asc()
        stmt = stmt.order_by(order)
        if limit is not None:
            stmt = stmt.limit(limit)

        result = await self.session.execute(stmt)
        return [
            SessionSample(
                pages_read=row.pages_read,
                duration_seconds=row.duration_seconds,
                start_time=to_utc(row.start_time),
                timezone=row.timezone,
            )
            for row in result
        ]

    async def count_books(self, scope: AnalyticsScope) -> int:
        stmt = select(func.count(Book.id)).where(Book.user_id == scope.owner_id)
        if scope.book_id is not None:
            stmt = stmt.where(Book.id == scope.book_id)
        return (await self.session.execute(stmt)).scalar_one()

    async def persist(self, record: SessionRecord) -> SessionRecord:
        start = _naive_utc(record.start_time)
        session_id = make_id(record.book_id, start)
        if await self.session.get(ReadingSession, session_id) is not None:
            raise ConflictError("A session for this book starting at this time already exists")

        row = ReadingSession(
            id=session_id,
            book_id=record.book_id,
            start_page=record.start_page,
            end_page=record.end_page,
            start_time=start,
            end_time=_naive_utc(record.end_time),
            duration_seconds=record.duration_seconds,
            pages_read=record.pages_read,
        )
        self.session.add(row)
        await self.session.commit()
        return replace(record, id=session_id)
