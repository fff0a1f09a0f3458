from app.schemas.base import CamelModel


class InstructorRead(CamelModel):
    id: int
    email: str
    name: str
    image: str | None = None


class PopularInstructorRow(CamelModel):
    name: str
    email: str
    image: str | None = None
    total_students: int
