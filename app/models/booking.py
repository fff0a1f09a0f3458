from sqlalchemy import Column, DateTime, ForeignKey, Integer, String, UniqueConstraint, func
from sqlalchemy.orm import relationship

from app.db.base_class import Base


class Booking(Base):
    __tablename__ = "bookings"

    id = Column(Integer, primary_key=True, index=True)
    student_email = Column(String(255), nullable=False, index=True)
    class_id = Column(
        Integer,
        ForeignKey("classes.id", ondelete="CASCADE"),
        nullable=False,
        index=True,
    )
    created_at = Column(
        DateTime(timezone=True), server_default=func.now(), nullable=False
    )

    __table_args__ = (
        UniqueConstraint(
            "student_email", "class_id", name="uq_bookings_student_class"
        ),
        # ids must never be reused: payments.booking_id is the idempotency key
        {"sqlite_autoincrement": True},
    )

    language_class = relationship("LanguageClass", back_populates="bookings")
