from fastapi import APIRouter, Depends, Query
from sqlalchemy import func, select
from sqlalchemy.ext.asyncio import AsyncSession

from readpulse.auth import get_current_user
from readpulse.database import get_session
from readpulse.errors import ForbiddenError, NotFoundError
from readpulse.models import Book, BookStatus, ReadingSession, User
from readpulse.schemas.book import BookCreate, BookListResponse, BookResponse, BookUpdate
from readpulse.schemas.session import SessionResponse

router = APIRouter(prefix="/api/books", tags=["books"])


async def get_owned_book(session: AsyncSession, book_id: int, user: User) -> Book:
    book = await session.get(Book, book_id)
    if book is None:
        raise NotFoundError("Book")
    if book.user_id != user.id:
        raise ForbiddenError("You do not have access to this book")
    return book


@router.get("", response_model=BookListResponse)
async def list_books(
    status: BookStatus | None = None,
    title: str | None = Query(None, description="Exact title match"),
    author: str | None = Query(None, description="Exact author match"),
    limit: int = Query(50, ge=1, le=200),
    offset: int = Query(0, ge=0),
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    where = [Book.user_id == user.id]
    if status is not None:
        where.append(Book.status == status)
    if title is not None:
        where.append(Book.title == title)
    if author is not None:
        where.append(Book.author == author)

    total = (await session.execute(select(func.count(Book.id)).where(*where))).scalar_one()
    result = await session.execute(
        select(Book)
        .where(*where)
        .order_by(Book.created_at.desc(), Book.id.desc())
        .offset(offset)
        .limit(limit)
    )
    return {"books": result.scalars().all(), "total": total}


@router.post("", response_model=BookResponse, status_code=201)
async def create_book(
    data: BookCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    book = Book(user_id=user.id, **data.model_dump())
    session.add(book)
    await session.commit()
    await session.refresh(book)
    return book


@router.get("/{book_id}", response_model=BookResponse)
async def get_book(
    book_id: int,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    return await get_owned_book(session, book_id, user)


@router.put("/{book_id}", response_model=BookResponse)
async def update_book(
    book_id: int,
    data: BookUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    book = await get_owned_book(session, book_id, user)
    for key, value in data.model_dump(exclude_unset=True).items():
        setattr(book, key, value)
    await session.commit()
    await session.refresh(book)
    return book


@router.delete("/{book_id}", status_code=204)
async def delete_book(
    book_id: int,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    book = await get_owned_book(session, book_id, user)
    await session.delete(book)
    await session.commit()


@router.get("/{book_id}/sessions", response_model=list[SessionResponse])
async def list_book_sessions(
    book_id: int,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    await get_owned_book(session, book_id, user)
    result = await session.execute(
        select(ReadingSession)
        .where(ReadingSession.book_id == book_id)
        .order_by(ReadingSession.start_time)
    )
    return result.scalars().all()
