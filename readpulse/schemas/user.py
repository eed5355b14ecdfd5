
from pydantic import BaseModel, ConfigDict, Field

from readpulse.schemas.types import UtcDatetime


class UserCreate(BaseModel):
    username: str = Field(..., min_length=1, max_length=100)
    timezone: str | None = Field(None, description="IANA timezone, e.g. 'Europe/Berlin'")


class UserUpdate(BaseModel):
    timezone: str = Field(..., min_length=1, description="IANA timezone, e.g. 'Europe/Berlin'")


class UserResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    username: str
    timezone: str
    created_at: UtcDatetime
