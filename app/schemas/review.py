"""Pydantic schemas for reviews."""

from datetime import datetime

from pydantic import BaseModel, Field


class ReviewBase(BaseModel):
    email: str
    rating: int = Field(..., description="Star rating, expected 1-5")
    text: str


class ReviewCreate(ReviewBase):
    """Body of a create request; id and created_at are never accepted."""


class ReviewOut(ReviewBase):
    id: int = Field(..., description="Store-assigned identifier")
    created_at: datetime

    model_config = {"from_attributes": True}


class ErrorOut(BaseModel):
    error: str
