from fastapi import APIRouter, Depends
from sqlalchemy import select
from sqlalchemy.ext.asyncio import AsyncSession

from readpulse.auth import get_current_user
from readpulse.database import get_session
from readpulse.errors import ConflictError
from readpulse.models import User
from readpulse.schemas.user import UserCreate, UserResponse, UserUpdate
from readpulse.timezones import get_zone, resolve_timezone

router = APIRouter(prefix="/api/users", tags=["users"])


@router.post("", response_model=UserResponse, status_code=201)
async def create_user(data: UserCreate, session: AsyncSession = Depends(get_session)):
    tz_name = resolve_timezone(data.timezone)
    get_zone(tz_name)

    existing = await session.execute(select(User.id).where(User.username == data.username))
    if existing.scalar_one_or_none() is not None:
        raise ConflictError("Username already taken")

    user = User(username=data.username, timezone=tz_name)
    session.add(user)
    await session.commit()
    await session.refresh(user)
    return user


@router.get("/me", response_model=UserResponse)
async def get_me(user: User = Depends(get_current_user)):
    return user


@router.put("/me", response_model=UserResponse)
async def update_me(
    data: UserUpdate,
    user: User = Depends(get_current_user),
    session: AsyncSession = Depends(get_session),
):
    get_zone(data.timezone)
    user.timezone = data.timezone
    await session.commit()
    await session.refresh(user)
    return user
