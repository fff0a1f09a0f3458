from fastapi import APIRouter, Depends, HTTPException, status
from sqlalchemy.exc import IntegrityError
from sqlalchemy.orm import Session

from app.core.current_user import Identity, get_current_identity
from app.core.deps import get_db
from app.core.permissions import ensure_same_email, require_student
from app.models.booking import Booking
from app.models.language_class import LanguageClass
from app.models.payment import Payment
from app.models.user import User
from app.schemas.booking import BookingCreate, BookingRead, DeleteResult

router = APIRouter()


def _get_own_booking(db: Session, booking_id: int, student: User) -> Booking:
    booking = db.query(Booking).filter(Booking.id == booking_id).first()
    if not booking:
        raise HTTPException(status_code=404, detail="Booking not found")
    if booking.student_email != student.email:
        raise HTTPException(
            status_code=status.HTTP_401_UNAUTHORIZED,
            detail="unauthorized access",
        )
    return booking


@router.get("", response_model=list[BookingRead])
def list_bookings(
    email: str | None = None,
    db: Session = Depends(get_db),
    identity: Identity = Depends(get_current_identity),
):
    email = ensure_same_email(email, identity)
    return (
        db.query(Booking)
        .filter(Booking.student_email == email)
        .order_by(Booking.id.asc())
        .all()
    )


@router.get("/{booking_id}", response_model=BookingRead)
def get_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    student: User = Depends(require_student),
):
    return _get_own_booking(db, booking_id, student)


@router.post("", response_model=BookingRead, status_code=status.HTTP_201_CREATED)
def create_booking(
    payload: BookingCreate,
    db: Session = Depends(get_db),
    student: User = Depends(require_student),
):
    language_class = (
        db.query(LanguageClass).filter(LanguageClass.id == payload.class_id).first()
    )
    if not language_class:
        raise HTTPException(status_code=404, detail="Class not found")

    already_paid = (
        db.query(Payment)
        .filter(Payment.email == student.email, Payment.class_id == payload.class_id)
        .first()
    )
    if already_paid:
        raise HTTPException(status_code=409, detail="Already enrolled in this class")

    booking = Booking(student_email=student.email, class_id=payload.class_id)
    db.add(booking)

    try:
        db.commit()
    except IntegrityError:
        db.rollback()
        raise HTTPException(status_code=409, detail="Class already booked")

    db.refresh(booking)
    return booking


@router.delete("/{booking_id}", response_model=DeleteResult)
def cancel_booking(
    booking_id: int,
    db: Session = Depends(get_db),
    student: User = Depends(require_student),
):
    booking = _get_own_booking(db, booking_id, student)
    db.delete(booking)
    db.commit()
    return {"deleted_count": 1}
