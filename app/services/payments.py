import logging
from datetime import datetime, timezone

import stripe
from fastapi import HTTPException, status
from sqlalchemy import update
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.config import PAYMENT_CURRENCY, STRIPE_SECRET_KEY
from app.models.booking import Booking
from app.models.language_class import LanguageClass
from app.models.payment import Payment
from app.schemas.payment import PaymentCreate, PaymentRead

logger = logging.getLogger(__name__)

stripe.api_key = STRIPE_SECRET_KEY


def to_minor_units(price: float) -> int:
    """Dollars to cents, rounding away float noise (19.99 -> 1999)."""
    return int(round(price * 100))


def create_payment_intent(price: float) -> str:
    """Ask Stripe for a card PaymentIntent and return its client secret.

    Nothing is stored locally; the intent only matters to the browser
    confirming the card.
    """
    amount = to_minor_units(price)
    intent = stripe.PaymentIntent.create(
        amount=amount,
        currency=PAYMENT_CURRENCY,
        payment_method_types=["card"],
    )
    logger.info("created payment intent %s for %s %s", intent.id, amount, PAYMENT_CURRENCY)
    return intent.client_secret


def _conflict(detail: str) -> HTTPException:
    return HTTPException(status_code=status.HTTP_409_CONFLICT, detail=detail)


def capture_payment(db: Session, payload: PaymentCreate) -> dict:
    """Turn a booking into a paid enrollment.

    Inserts the payment, deletes the booking and moves one seat from
    ``available_seats`` to ``students`` in a single transaction. The booking
    id is the idempotency key: a second capture for the same booking is
    rejected with 409 and changes nothing.
    """
    if db.query(Payment).filter(Payment.booking_id == payload.booking_id).first():
        logger.warning("duplicate payment for booking %s rejected", payload.booking_id)
        raise _conflict("Payment already captured for this booking")

    booking = db.query(Booking).filter(Booking.id == payload.booking_id).first()
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    if booking.student_email != payload.email or booking.class_id != payload.class_id:
        raise HTTPException(
            status_code=status.HTTP_400_BAD_REQUEST,
            detail="Booking does not match payment",
        )

    try:
        # arithmetic in SQL so concurrent captures cannot lose an update
        result = db.execute(
            update(LanguageClass)
            .where(
                LanguageClass.id == payload.class_id,
                LanguageClass.available_seats > 0,
            )
            .values(
                available_seats=LanguageClass.available_seats - 1,
                students=LanguageClass.students + 1,
            )
            .execution_options(synchronize_session=False)
        )
        if result.rowcount != 1:
            class_exists = (
                db.query(LanguageClass.id)
                .filter(LanguageClass.id == payload.class_id)
                .first()
            )
            db.rollback()
            if not class_exists:
                raise HTTPException(status_code=404, detail="Class not found")
            raise _conflict("No seats available")

        payment = Payment(
            email=payload.email,
            class_id=payload.class_id,
            booking_id=payload.booking_id,
            transaction_id=payload.transaction_id,
            price=payload.price,
            date=payload.date or datetime.now(timezone.utc),
        )
        db.add(payment)
        db.delete(booking)
        db.commit()
    except IntegrityError:
        db.rollback()
        logger.warning("concurrent payment for booking %s rejected", payload.booking_id)
        raise _conflict("Payment already captured for this booking")

    db.refresh(payment)
    logger.info(
        "captured payment %s: booking %s -> class %s for %s",
        payment.id,
        payload.booking_id,
        payload.class_id,
        payload.email,
    )
    return {
        "payment": PaymentRead.model_validate(payment),
        "inserted_id": payment.id,
        "deleted_count": 1,
        "modified_count": result.rowcount,
    }
