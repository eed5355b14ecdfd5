from fastapi import APIRouter, Depends
from sqlalchemy.ext.asyncio import AsyncSession

from readpulse.auth import get_current_user
from readpulse.database import get_session
from readpulse.metrics import format_speed, reading_speed
from readpulse.models import User
from readpulse.schemas.session import SessionCreate, SessionCreated
from readpulse.services.repository import SessionRepository
from readpulse.services.sessions import SessionInput, create_session

router = APIRouter(prefix="/api/sessions", tags=["sessions"])


@router.post("", response_model=SessionCreated, status_code=201)
async def log_session(
    data: SessionCreate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    record = await create_session(
        SessionRepository(session),
        SessionInput(**data.model_dump()),
        requesting_user_id=user.id,
    )
    return SessionCreated(
        id=record.id,
        book_id=record.book_id,
        pages_read=record.pages_read,
        duration_seconds=record.duration_seconds,
        speed=reading_speed(record.pages_read, record.duration_seconds),
        speed_label=format_speed(record.pages_read, record.duration_seconds),
    )
