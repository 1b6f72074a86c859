"""
API endpoints for book reviews.

Anyone can read the reviews of a book.  Submitting and deleting require a
bearer token; the identity it carries is passed explicitly to the service,
so concurrent clients never share a session.  Posting twice for the same
book updates the first review instead of adding a second one.
"""

from typing import List

from fastapi import APIRouter, Depends, HTTPException, status

from bookstore_api.app.core.errors import BookstoreError
from bookstore_api.app.core.security import get_current_user
from bookstore_api.app.schemas.common import Envelope
from bookstore_api.app.schemas.review import Review, ReviewCreate
from bookstore_api.app.schemas.user import SessionUser
from bookstore_api.app.services.review_service import ReviewService


router = APIRouter()


@router.get(
    "/books/{book_id}/reviews",
    response_model=Envelope[List[Review]],
    summary="List reviews of a book",
)
async def list_reviews(book_id: int) -> Envelope[List[Review]]:
    return await ReviewService.list_reviews_for_book(book_id)


@router.post(
    "/books/{book_id}/reviews",
    response_model=Envelope[Review],
    summary="Add or update your review of a book",
)
async def upsert_review(
    book_id: int,
    data: ReviewCreate,
    current_user: SessionUser = Depends(get_current_user),
) -> Envelope[Review]:
    """Create the caller's review of the book, or replace its rating and comment."""
    try:
        return await ReviewService.upsert_review(
            book_id, data.rating, data.comment, current_user=current_user
        )
    except BookstoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.delete(
    "/reviews/{review_id}",
    response_model=Envelope[Review],
    summary="Delete your review",
)
async def delete_review(
    review_id: int,
    current_user: SessionUser = Depends(get_current_user),
) -> Envelope[Review]:
    """Delete a review and return it.

    404 if the review does not exist, 403 if it belongs to another user.
    """
    try:
        return await ReviewService.delete_review(review_id, current_user=current_user)
    except BookstoreError as e:
        headers = {"WWW-Authenticate": "Bearer"} if e.status_code == status.HTTP_401_UNAUTHORIZED else None
        raise HTTPException(status_code=e.status_code, detail=e.message, headers=headers)
