from datetime import datetime

from pydantic import Field, field_validator

from app.schemas.base import CamelModel, Email, to_utc


class PaymentIntentCreate(CamelModel):
    price: float = Field(gt=0)


class PaymentIntentRead(CamelModel):
    client_secret: str


class PaymentCreate(CamelModel):
    email: Email
    class_id: int
    booking_id: int
    price: float = Field(ge=0)
    transaction_id: str | None = None
    date: datetime | None = None

    @field_validator("date")
    @classmethod
    def date_to_utc(cls, value: datetime | None) -> datetime | None:
        return to_utc(value)


class PaymentRead(CamelModel):
    id: int
    email: str
    class_id: int
    booking_id: int
    transaction_id: str | None = None
    price: float
    date: datetime


class PaymentCaptureResult(CamelModel):
    payment: PaymentRead
    inserted_id: int
    deleted_count: int
    modified_count: int
