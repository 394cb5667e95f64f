"""FastAPI application entry point."""

import logging

from dotenv import load_dotenv

from fastapi import FastAPI

# Load environment variables from .env file
load_dotenv()

from app import models  # noqa: F401,E402
from app.api.routes import router  # noqa: E402
from app.api.endpoints import pages  # noqa: E402
from app.core.config import settings  # noqa: E402
from app.db.init_db import init_db  # noqa: E402

logging.basicConfig(level=settings.log_level, format="%(asctime)s %(levelname)s %(name)s %(message)s")
logger = logging.getLogger(__name__)

app = FastAPI(title=settings.project_name)
app.include_router(router, prefix=settings.api_prefix)

# The review page and its list fragment live at the root path (no prefix)
app.include_router(pages.router)


@app.on_event("startup")
def on_startup() -> None:
    """Initialize database artifacts."""
    init_db()
    logger.info("%s started, API under %s", settings.project_name, settings.api_prefix)


@app.get("/health", tags=["health"])
async def health() -> dict[str, str]:
    """Health check endpoint for Docker."""
    return {"status": "healthy"}
