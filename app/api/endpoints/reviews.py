"""Review endpoints.

Legacy paths (``/post-review``, ``/get-reviews``, ``/reviews/get-reviews``) are
registered on the same handlers as ``/reviews``.
"""

import logging

from fastapi import APIRouter, Depends, Request
from fastapi.concurrency import run_in_threadpool
from fastapi.responses import JSONResponse
from sqlalchemy.orm import Session

from app.db.session import get_db
from app.schemas.review import ErrorOut, ReviewCreate, ReviewOut
from app.services.review import create_review, list_reviews

logger = logging.getLogger(__name__)

CREATE_FAILED = "Failed to submit review"
LIST_FAILED = "Failed to fetch reviews"

router = APIRouter(tags=["reviews"])


def error_response(message: str) -> JSONResponse:
    """Generic failure payload; store details stay in the server log."""
    return JSONResponse(status_code=500, content=ErrorOut(error=message).model_dump())


@router.post("/reviews", response_model=ReviewOut, responses={500: {"model": ErrorOut}})
@router.post("/post-review", response_model=ReviewOut, include_in_schema=False)
async def submit_review(request: Request, db: Session = Depends(get_db)):
    """Store a review and return it with its id and created_at."""
    try:
        payload = ReviewCreate.model_validate(await request.json())
        return await run_in_threadpool(create_review, db, payload)
    except Exception:  # noqa: BLE001
        logger.exception("Error submitting review")
        return error_response(CREATE_FAILED)


@router.get("/reviews", response_model=list[ReviewOut], responses={500: {"model": ErrorOut}})
@router.get("/reviews/get-reviews", response_model=list[ReviewOut], include_in_schema=False)
@router.get("/get-reviews", response_model=list[ReviewOut], include_in_schema=False)
def get_reviews(db: Session = Depends(get_db)):
    """Return all reviews, newest first."""
    try:
        return list_reviews(db)
    except Exception:  # noqa: BLE001
        logger.exception("Error fetching reviews")
        return error_response(LIST_FAILED)
