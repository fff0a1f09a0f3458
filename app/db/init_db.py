import logging

from app.db.base import Base
from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    Base.metadata.create_all(bind=engine)


def close_db() -> None:
    logger.info("disposing database engine")
    engine.dispose()
