from fastapi import Depends, Header
from sqlalchemy.ext.asyncio import AsyncSession

from readpulse.database import get_session
from readpulse.errors import UnauthorizedError
from readpulse.models import User


async def get_current_user(
    x_user_id: int | None = Header(None, description="Id of the requesting user"),
    session: AsyncSession = Depends(get_session),
) -> User:
    if x_user_id is None:
        raise UnauthorizedError("Authentication required")
    user = await session.get(User, x_user_id)
    if user is None:
        raise UnauthorizedError("Unknown user")
    return user
