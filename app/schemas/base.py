from datetime import datetime, timezone
from typing import Annotated

from pydantic import AfterValidator, BaseModel, EmailStr
from pydantic.alias_generators import to_camel


def normalize_email(value: str) -> str:
    return value.strip().lower()


def to_utc(value: datetime | None) -> datetime | None:
    # SQLite keeps the wall-clock time and drops the offset, so store UTC
    if value is not None and value.tzinfo is not None:
        return value.astimezone(timezone.utc)
    return value


# stored and compared against the token email, so lowercase the whole address
Email = Annotated[EmailStr, AfterValidator(normalize_email)]


class CamelModel(BaseModel):
    """Python attributes stay snake_case; JSON uses camelCase."""

    class Config:
        alias_generator = to_camel
        populate_by_name = True
        from_attributes = True
