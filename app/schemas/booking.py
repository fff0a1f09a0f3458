from datetime import datetime

from app.schemas.base import CamelModel


class BookingCreate(CamelModel):
    class_id: int


class BookingRead(CamelModel):
    id: int
    student_email: str
    class_id: int
    created_at: datetime


class DeleteResult(CamelModel):
    deleted_count: int
