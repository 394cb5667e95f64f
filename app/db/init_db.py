"""Database initialization utilities."""

import logging

from app.db.base import Base
from app.db.session import engine

logger = logging.getLogger(__name__)


def init_db() -> None:
    """Create tables that do not exist yet."""
    Base.metadata.create_all(bind=engine)
    logger.info("Database tables ready: %s", ", ".join(sorted(Base.metadata.tables)))
