"""HTML pages: the review form and the rendered review list."""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.responses import HTMLResponse
from sqlalchemy.orm import Session

from app.api.endpoints.reviews import CREATE_FAILED, LIST_FAILED
from app.core.config import settings
from app.core.templates import MAX_STARS, templates
from app.db.session import get_db
from app.services.review import list_reviews

logger = logging.getLogger(__name__)

router = APIRouter(tags=["pages"], include_in_schema=False)


@router.get("/", response_class=HTMLResponse)
async def index(request: Request) -> HTMLResponse:
    """Form plus an empty list region; the list is fetched by the page script."""
    return templates.TemplateResponse(
        request,
        "index.html",
        {
            "title": settings.project_name,
            "ratings": range(1, MAX_STARS + 1),
            "default_rating": MAX_STARS,
            "create_url": f"{settings.api_prefix}/reviews",
            "list_url": request.url_for("review_list_partial").path,
            "create_failed": CREATE_FAILED,
            "list_failed": LIST_FAILED,
        },
    )


@router.get("/partials/reviews", response_class=HTMLResponse, name="review_list_partial")
def review_list_partial(request: Request, db: Session = Depends(get_db)) -> HTMLResponse:
    """Render the newest-first review list as an HTML fragment."""
    try:
        reviews = list_reviews(db)
    except Exception:  # noqa: BLE001
        logger.exception("Error fetching reviews")
        return templates.TemplateResponse(
            request, "_review_list.html", {"error": LIST_FAILED}, status_code=500
        )
    return templates.TemplateResponse(request, "_review_list.html", {"reviews": reviews})
