"""Root API router."""

from fastapi import APIRouter

from app.api.endpoints import reviews

router = APIRouter()


@router.get("/health", tags=["health"])
async def health_check() -> dict[str, str]:
    """Simple health check endpoint."""
    return {"status": "ok"}


router.include_router(reviews.router)

# pages are mounted at the root path in main.py
