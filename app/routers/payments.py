from fastapi import APIRouter, Depends, status
from sqlalchemy.orm import Session

from app.core.current_user import Identity, get_current_identity
from app.core.deps import get_db
from app.core.permissions import ensure_same_email, require_student
from app.models.payment import Payment
from app.models.user import User
from app.schemas.payment import (
    PaymentCaptureResult,
    PaymentCreate,
    PaymentIntentCreate,
    PaymentIntentRead,
    PaymentRead,
)
from app.services import payments as payment_service

router = APIRouter()


@router.post("/create-payment-intent", response_model=PaymentIntentRead)
def create_payment_intent(
    payload: PaymentIntentCreate,
    student: User = Depends(require_student),
):
    client_secret = payment_service.create_payment_intent(payload.price)
    return {"client_secret": client_secret}


@router.post(
    "/payments",
    response_model=PaymentCaptureResult,
    status_code=status.HTTP_201_CREATED,
    responses={
        404: {"description": "Booking not found"},
        409: {"description": "Booking already paid or class full"},
    },
)
def capture_payment(
    payload: PaymentCreate,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    ensure_same_email(payload.email, identity)
    return payment_service.capture_payment(db, payload)


@router.get("/payments", response_model=list[PaymentRead])
def list_payments(
    email: str | None = None,
    db: Session = Depends(get_db),
    student: User = Depends(require_student),
    identity: Identity = Depends(get_current_identity),
):
    email = ensure_same_email(email, identity)
    return (
        db.query(Payment)
        .filter(Payment.email == email)
        .order_by(Payment.date.desc(), Payment.id.desc())
        .all()
    )
