"""
Service layer.

The services are the only code that reads or writes the in-memory stores
and the process session.  Both the HTTP endpoints and in-process callers
go through them, so swapping the stores for a real database does not
change API handlers.
"""

from .book_service import BookService
from .review_service import ReviewService
from .user_service import UserService

__all__ = ["BookService", "ReviewService", "UserService"]
