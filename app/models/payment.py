from sqlalchemy import Column, DateTime, ForeignKey, Integer, Numeric, String, func

from app.db.base_class import Base


class Payment(Base):
    """A captured payment. Written once, never updated.

    ``booking_id`` is not a foreign key: the booking row is deleted in the same
    transaction that inserts the payment. It stays unique so a booking can only
    ever be paid for once.
    """

    __tablename__ = "payments"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(255), nullable=False, index=True)
    class_id = Column(Integer, ForeignKey("classes.id"), nullable=False, index=True)
    booking_id = Column(Integer, nullable=False, unique=True)
    transaction_id = Column(String(255), nullable=True)
    price = Column(Numeric(10, 2, asdecimal=False), nullable=False)

    date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False)
