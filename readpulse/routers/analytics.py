import datetime as dt

from fastapi import APIRouter, Depends, Query
from sqlalchemy.ext.asyncio import AsyncSession

from readpulse.auth import get_current_user
from readpulse.config import DEFAULT_ANALYTICS_LIMIT
from readpulse.database import get_session
from readpulse.models import User
from readpulse.schemas.analytics import HourlySpeedResponse, SummaryResponse, VelocityResponse
from readpulse.services import analytics
from readpulse.services.repository import AnalyticsScope, SessionRepository

router = APIRouter(prefix="/api/analytics", tags=["analytics"])


def analytics_scope(
    start_date: dt.datetime | None = Query(None, description="Only sessions starting at or after this instant"),
    end_date: dt.datetime | None = Query(None, description="Only sessions starting at or before this instant"),
    book_id: int | None = None,
    user: User = Depends(get_current_user),
) -> AnalyticsScope:
    return AnalyticsScope(owner_id=user.id, book_id=book_id, start_date=start_date, end_date=end_date)


@router.get("/speed", response_model=HourlySpeedResponse)
async def speed_by_hour(
    scope: AnalyticsScope = Depends(analytics_scope),
    limit: int = Query(DEFAULT_ANALYTICS_LIMIT, ge=1, le=1000),
    session: AsyncSession = Depends(get_session),
):
    # Most recent sessions win when the limit truncates
    sessions = await SessionRepository(session).list_sessions(scope, limit=limit, newest_first=True)
    return analytics.hourly_speed(sessions)


@router.get("/velocity", response_model=VelocityResponse, response_model_exclude_none=True)
async def reading_velocity(
    scope: AnalyticsScope = Depends(analytics_scope),
    limit: int = Query(DEFAULT_ANALYTICS_LIMIT, ge=1, le=1000),
    session: AsyncSession = Depends(get_session),
):
    sessions = await SessionRepository(session).list_sessions(scope, limit=limit)
    return analytics.velocity(sessions)


@router.get("/summary", response_model=SummaryResponse)
async def reading_summary(
    scope: AnalyticsScope = Depends(analytics_scope),
    session: AsyncSession = Depends(get_session),
):
    repo = SessionRepository(session)
    sessions = await repo.list_sessions(scope)
    return analytics.summary(sessions, await repo.count_books(scope))
