"""Expose schemas for easier import."""

from app.schemas.review import ErrorOut, ReviewCreate, ReviewOut  # noqa: F401
