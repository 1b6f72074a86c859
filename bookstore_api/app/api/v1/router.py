"""
Top-level router for version 1 of the API.

This router aggregates the domain routers (books, users, reviews) under a
unified prefix.  When new domains are introduced, include their routers
here.
"""

from fastapi import APIRouter

from .endpoints import books, reviews, users

router = APIRouter()

router.include_router(books.router, prefix="/books", tags=["books"])
router.include_router(users.router, prefix="/users", tags=["users"])
# The reviews router spans "/books/{id}/reviews" and "/reviews/{id}", so it
# declares full paths itself and takes no prefix.
router.include_router(reviews.router, tags=["reviews"])
