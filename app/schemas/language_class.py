from pydantic import Field

from app.schemas.base import CamelModel, Email


class ClassCreate(CamelModel):
    name: str = Field(min_length=1, max_length=255)
    image: str | None = None
    instructor_name: str | None = None
    instructor_email: Email
    price: float = Field(ge=0)
    available_seats: int = Field(ge=0)


class ClassUpdate(CamelModel):
    """Fields an instructor may change on their own class."""

    name: str | None = Field(default=None, min_length=1, max_length=255)
    image: str | None = None
    instructor_name: str | None = None
    price: float | None = Field(default=None, ge=0)
    available_seats: int | None = Field(default=None, ge=0)


class ClassFeedback(CamelModel):
    feedback: str


class ClassRead(CamelModel):
    id: int
    name: str
    image: str | None = None
    instructor_name: str | None = None
    instructor_email: str
    price: float
    available_seats: int
    students: int
    status: str
    feedback: str | None = None
