from typing import Literal

from pydantic import EmailStr

from app.schemas.base import CamelModel, Email

Role = Literal["student", "instructor", "admin"]


class UserCreate(CamelModel):
    email: Email
    name: str | None = None
    image: str | None = None
    role: Role | None = None


class UserRead(CamelModel):
    id: int
    email: EmailStr
    name: str | None = None
    image: str | None = None
    role: str | None = None


class UserRoleRead(CamelModel):
    is_student: bool
    is_instructor: bool
    is_admin: bool
