"""Review model."""

from datetime import datetime, timezone

from sqlalchemy import Column, DateTime, Integer, String, Text, func

from app.db.base import Base


def _utcnow() -> datetime:
    return datetime.now(timezone.utc)


class Review(Base):
    """A submitted restaurant review. Rows are never updated or deleted."""

    __tablename__ = "reviews"

    id = Column(Integer, primary_key=True, index=True)
    email = Column(String(320), nullable=False)
    rating = Column(Integer, nullable=False)  # 1-5, not enforced
    text = Column(Text, nullable=False)
    created_at = Column(
        DateTime(timezone=True),
        nullable=False,
        index=True,
        default=_utcnow,
        server_default=func.now(),
    )
