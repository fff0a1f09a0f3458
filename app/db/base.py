from app.db.base_class import Base

# import models so SQLAlchemy registers them on Base.metadata
from app.models import booking, instructor, language_class, payment, review, user  # noqa: F401
