"""
Business logic for reviews.

A user holds at most one review per book.  Submitting a review for a book
the user already reviewed updates that review in place: rating, comment
and date change while id and username stay as first written.  Only the
author of a review may delete it.

Mutating operations take the acting identity explicitly via
``current_user``; when it is omitted they fall back to the process
session established by ``UserService.login``.
"""

import datetime
import logging
from typing import List, Optional

from ..core.errors import ForbiddenError, NotFoundError, UnauthorizedError, ValidationError
from ..core.store import get_store
from ..schemas.common import Envelope
from ..schemas.review import Review
from ..schemas.user import SessionUser

logger = logging.getLogger(__name__)


class ReviewService:
    """Service for listing, upserting and deleting book reviews."""

    @classmethod
    async def list_reviews_for_book(cls, book_id: int) -> Envelope[List[Review]]:
        """Reviews of one book in insertion order (empty list if none)."""
        reviews = [r.model_copy() for r in get_store().reviews.for_book(book_id)]
        return Envelope[List[Review]](data=reviews)

    @classmethod
    async def upsert_review(
        cls,
        book_id: int,
        rating: int,
        comment: str,
        current_user: Optional[SessionUser] = None,
    ) -> Envelope[Review]:
        """Create the user's review of a book, or update it if it exists.

        Raises ``UnauthorizedError`` without an identity, ``ValidationError``
        for a rating outside 1..5 or a blank comment, and ``NotFoundError``
        if the book does not exist.
        """
        user = cls._acting_user(current_user, "review books")
        if not 1 <= rating <= 5:
            raise ValidationError("Rating must be between 1 and 5")
        if not comment or not comment.strip():
            raise ValidationError("Please enter a comment for your review")
        store = get_store()
        if store.catalog.get(book_id) is None:
            raise NotFoundError(f"Book {book_id} not found")

        today = datetime.date.today()
        with store.reviews.lock:
            review = store.reviews.find_for(book_id, user.id)
            if review is not None:
                review.rating = rating
                review.comment = comment
                review.date = today
                logger.info("User %s updated review %s for book %s", user.id, review.id, book_id)
            else:
                review = store.reviews.add(
                    book_id=book_id,
                    user_id=user.id,
                    username=user.username,
                    rating=rating,
                    comment=comment,
                    date=today,
                )
                logger.info("User %s submitted review %s for book %s", user.id, review.id, book_id)
            return Envelope[Review](data=review.model_copy())

    @classmethod
    async def delete_review(
        cls,
        review_id: int,
        current_user: Optional[SessionUser] = None,
    ) -> Envelope[Review]:
        """Delete a review owned by the acting user and return it.

        Raises ``UnauthorizedError`` without an identity, ``NotFoundError``
        if the review does not exist and ``ForbiddenError`` if it belongs
        to someone else.  Nothing else is removed.
        """
        user = cls._acting_user(current_user, "delete reviews")
        reviews = get_store().reviews
        with reviews.lock:
            review = reviews.get(review_id)
            if review is None:
                raise NotFoundError("Review not found")
            if review.user_id != user.id:
                logger.warning(
                    "User %s tried to delete review %s owned by user %s",
                    user.id,
                    review_id,
                    review.user_id,
                )
                raise ForbiddenError("You can only delete your own reviews")
            reviews.remove(review_id)
        logger.info("User %s deleted review %s", user.id, review_id)
        return Envelope[Review](data=review)

    @staticmethod
    def _acting_user(current_user: Optional[SessionUser], action: str) -> SessionUser:
        store = get_store()
        user = current_user if current_user is not None else store.session.user
        if user is None:
            raise UnauthorizedError(f"You must be logged in to {action}")
        # The identity must name a registered user, id and username alike.
        record = store.users.get(user.id)
        if record is None or record.username != user.username:
            logger.warning("Rejected unknown identity %s (%s)", user.id, user.username)
            raise UnauthorizedError("Unknown user")
        return user
