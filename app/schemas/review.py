from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel, to_utc


class ReviewCreate(CamelModel):
    name: str
    image: str | None = None
    rating: int | None = Field(default=None, ge=1, le=5)
    details: str
    date: datetime | None = None

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value: datetime | None) -> datetime | None:
        return to_utc(value)


class ReviewRead(CamelModel):
    id: int
    name: str
    image: str | None = None
    rating: int | None = None
    details: str
    date: datetime
