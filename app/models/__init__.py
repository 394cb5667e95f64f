"""Import models so they register on the metadata."""

from app.models.review import Review  # noqa: F401
