from pydantic import BaseModel, ConfigDict


class HourBucketResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    hour: int
    average_speed: int
    total_pages: int
    total_duration: int
    session_count: int


class HourlySpeedResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    speed_by_hour: list[HourBucketResponse]
    total_sessions: int


class VelocityResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    average_speed: int
    recent_speed: int
    velocity_change: int
    trend: str
    total_sessions: int | None = None


class SummaryResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    total_sessions: int
    total_books: int
    total_pages_read: int
    total_reading_time: int
    average_speed: int
    average_session_duration: int
