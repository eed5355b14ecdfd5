from pydantic import BaseModel, ConfigDict, Field, model_validator

from readpulse.models.book import BookStatus
from readpulse.schemas.types import UtcDatetime


class BookCreate(BaseModel):
    title: str = Field(..., min_length=1, max_length=200)
    author: str = Field(..., min_length=1, max_length=200)
    total_pages: int = Field(..., ge=1)
    status: BookStatus = BookStatus.READING


class BookUpdate(BaseModel):
    title: str | None = Field(None, min_length=1, max_length=200)
    author: str | None = Field(None, min_length=1, max_length=200)
    total_pages: int | None = Field(None, ge=1)
    status: BookStatus | None = None

    @model_validator(mode="after")
    def require_a_field(self):
        if not self.model_fields_set:
            raise ValueError("At least one field must be provided for update")
        return self


class BookResponse(BaseModel):
    model_config = ConfigDict(from_attributes=True)

    id: int
    user_id: int
    title: str
    author: str
    total_pages: int
    status: BookStatus
    created_at: UtcDatetime
    updated_at: UtcDatetime


class BookListResponse(BaseModel):
    books: list[BookResponse]
    total: int
