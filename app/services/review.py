"""Review persistence: insert-and-return and newest-first listing."""

from __future__ import annotations

import logging

from sqlalchemy import select
from sqlalchemy.orm import Session

from app.models.review import Review
from app.schemas.review import ReviewCreate, ReviewOut

logger = logging.getLogger(__name__)

# Columns returned by a list call, in response order
REVIEW_COLUMNS = (Review.id, Review.email, Review.rating, Review.text, Review.created_at)


def create_review(db: Session, payload: ReviewCreate) -> ReviewOut:
    """Insert a review and return the stored row, including its id and created_at."""
    try:
        review = Review(**payload.model_dump())
        db.add(review)
        db.commit()
        db.refresh(review)
    except Exception:
        db.rollback()
        raise
    logger.info("Created review id=%s rating=%s", review.id, review.rating)
    return ReviewOut.model_validate(review)


def list_reviews(db: Session) -> list[ReviewOut]:
    """Return every review, newest first."""
    stmt = select(*REVIEW_COLUMNS).order_by(Review.created_at.desc())
    rows = db.execute(stmt).all()
    return [ReviewOut.model_validate(row) for row in rows]
