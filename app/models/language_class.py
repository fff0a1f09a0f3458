from sqlalchemy import CheckConstraint, Numeric, String, Text
from sqlalchemy.orm import Mapped, mapped_column, relationship

from app.db.base_class import Base

PENDING = "pending"
APPROVED = "approved"
DENIED = "denied"


class LanguageClass(Base):
    __tablename__ = "classes"

    id: Mapped[int] = mapped_column(primary_key=True, index=True)
    name: Mapped[str] = mapped_column(String(255), nullable=False)
    image: Mapped[str | None] = mapped_column(String(1024))
    instructor_name: Mapped[str | None] = mapped_column(String(255))
    instructor_email: Mapped[str] = mapped_column(
        String(255), nullable=False, index=True
    )
    price: Mapped[float] = mapped_column(
        Numeric(10, 2, asdecimal=False), nullable=False, default=0
    )
    available_seats: Mapped[int] = mapped_column(nullable=False, default=0)
    students: Mapped[int] = mapped_column(nullable=False, default=0)
    status: Mapped[str] = mapped_column(String(20), nullable=False, default=PENDING)
    feedback: Mapped[str | None] = mapped_column(Text)

    __table_args__ = (
        CheckConstraint("available_seats >= 0", name="ck_classes_available_seats"),
        CheckConstraint("students >= 0", name="ck_classes_students"),
    )

    bookings = relationship(
        "Booking", back_populates="language_class", cascade="all, delete-orphan"
    )
