"""Expose API endpoint routers."""

from app.api.endpoints import pages, reviews

__all__ = ["pages", "reviews"]
