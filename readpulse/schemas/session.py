import datetime as dt

from pydantic import BaseModel, ConfigDict, Field, model_validator

from readpulse.schemas.types import UtcDatetime


class SessionCreate(BaseModel):
    book_id: int
    start_page: int = Field(..., ge=0)
    end_page: int = Field(..., ge=0)
    start_time: dt.datetime
    end_time: dt.datetime

    @model_validator(mode="after")
    def validate_ranges(self):
        if self.end_page <= self.start_page:
            raise ValueError("end_page must be greater than start_page")
        # Mixed naive/aware inputs are compared as UTC
        start = self.start_time if self.start_time.tzinfo else self.start_time.replace(tzinfo=dt.UTC)
        end = self.end_time if self.end_time.tzinfo else self.end_time.replace(tzinfo=dt.UTC)
        if end <= start:
            raise ValueError("end_time must be after start_time")
        return self


class SessionCreated(BaseModel):
    id: int
    book_id: int
    pages_read: int
    duration_seconds: int
    speed: int
    speed_label: str


class SessionResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    book_id: int
    start_page: int
    end_page: int
    start_time: UtcDatetime
    end_time: UtcDatetime
    duration_seconds: int
    pages_read: int
    created_at: UtcDatetime
