"""Jinja2 environment for the review pages."""

from datetime import datetime
from pathlib import Path

from fastapi.templating import Jinja2Templates

TEMPLATE_DIR = Path(__file__).resolve().parent.parent / "templates"

MAX_STARS = 5
FILLED_STAR = "★"
EMPTY_STAR = "☆"


def rating_stars(rating: int | None) -> str:
    """Render a rating as a fixed five-glyph indicator, e.g. 3 -> ★★★☆☆."""
    filled = max(0, min(MAX_STARS, int(rating or 0)))
    return FILLED_STAR * filled + EMPTY_STAR * (MAX_STARS - filled)


def format_timestamp(value: datetime | None) -> str:
    if value is None:
        return ""
    return value.strftime("%Y-%m-%d %H:%M")


templates = Jinja2Templates(directory=str(TEMPLATE_DIR))
templates.env.filters["stars"] = rating_stars
templates.env.filters["timestamp"] = format_timestamp
