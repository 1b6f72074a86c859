"""
Pydantic schemas for book reviews.

A user holds at most one review per book; submitting again replaces the
rating and comment of the existing one.  ``ReviewCreate`` is the request
body for ``POST /books/{id}/reviews`` and ``Review`` the stored and
returned shape.
"""

import datetime

from pydantic import Field, field_validator

from .common import CamelModel


class ReviewCreate(CamelModel):
    """Schema for submitting (or resubmitting) a review."""

    rating: int = Field(..., ge=1, le=5, description="Rating from 1 to 5")
    comment: str = Field(..., description="Review text")

    @field_validator("comment")
    @classmethod
    def strip_comment(cls, v: str) -> str:
        """Trim whitespace and reject an empty comment."""
        v = v.strip()
        if not v:
            raise ValueError("Comment must not be empty")
        return v


class Review(CamelModel):
    """Schema for reading a review."""

    id: int
    book_id: int
    user_id: int
    username: str
    rating: int = Field(..., ge=1, le=5)
    comment: str
    date: datetime.date
