from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.db.base_class import Base


class Review(Base):
    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    name = Column(String(255), nullable=False)
    image = Column(String(1024), nullable=True)
    rating = Column(Integer, nullable=True)
    details = Column(Text, nullable=False)

    date = Column(DateTime(timezone=True), server_default=func.now(), nullable=False, index=True)
