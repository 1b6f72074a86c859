"""
Business logic for the book catalog.

The catalog is read-only at runtime.  Searches by author or title are a
plain case-insensitive substring match: no tokenising, no ranking, and an
empty query matches every book (the storefront's "browse all" links rely
on that).
"""

import logging
from typing import List

from ..core.errors import NotFoundError, ValidationError
from ..core.store import get_store
from ..schemas.book import Book
from ..schemas.common import Envelope

logger = logging.getLogger(__name__)


class BookService:
    """Service for browsing and searching the catalog."""

    @classmethod
    async def list_books(cls) -> Envelope[List[Book]]:
        """Return every book in catalog order."""
        return Envelope[List[Book]](data=list(get_store().catalog))

    @classmethod
    async def get_book(cls, book_id: int) -> Envelope[Book]:
        """Return the book with the given id or raise ``NotFoundError``."""
        book = get_store().catalog.get(book_id)
        if book is None:
            logger.info("Book %s not found", book_id)
            raise NotFoundError(f"Book {book_id} not found")
        return Envelope[Book](data=book)

    @classmethod
    async def get_book_by_isbn(cls, isbn: str) -> Envelope[Book]:
        """Return the book with exactly this ISBN.

        Raises ``ValidationError`` for an empty ISBN and ``NotFoundError``
        when no book matches.
        """
        if not isbn:
            raise ValidationError("ISBN must not be empty")
        book = get_store().catalog.get_by_isbn(isbn)
        if book is None:
            logger.info("No book with ISBN %s", isbn)
            raise NotFoundError("Book not found")
        return Envelope[Book](data=book)

    @classmethod
    async def list_books_by_author(cls, author: str) -> Envelope[List[Book]]:
        """Books whose author contains ``author``, ignoring case."""
        return Envelope[List[Book]](data=cls._matching("author", author))

    @classmethod
    async def list_books_by_title(cls, title: str) -> Envelope[List[Book]]:
        """Books whose title contains ``title``, ignoring case."""
        return Envelope[List[Book]](data=cls._matching("title", title))

    @staticmethod
    def _matching(field: str, query: str) -> List[Book]:
        needle = query.lower()
        return [b for b in get_store().catalog if needle in getattr(b, field).lower()]
