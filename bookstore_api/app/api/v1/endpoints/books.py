"""
API endpoints for the book catalog.

All routes are public.  The author and title searches take ``path``
parameters so an empty query (``/books/author/``) still routes and matches
every book.  The ISBN, author and title routes are declared before
``/{book_id}`` so their literal prefixes win.
"""

from typing import List

from fastapi import APIRouter, HTTPException

from bookstore_api.app.core.errors import BookstoreError
from bookstore_api.app.schemas.book import Book
from bookstore_api.app.schemas.common import Envelope
from bookstore_api.app.services.book_service import BookService


router = APIRouter()


@router.get("", response_model=Envelope[List[Book]], summary="List all books")
async def list_books() -> Envelope[List[Book]]:
    return await BookService.list_books()


@router.get("/isbn/{isbn}", response_model=Envelope[Book], summary="Get a book by ISBN")
async def get_book_by_isbn(isbn: str) -> Envelope[Book]:
    """Return the book with exactly this ISBN, or 404."""
    try:
        return await BookService.get_book_by_isbn(isbn)
    except BookstoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)


@router.get("/author/{author:path}", response_model=Envelope[List[Book]], summary="Search books by author")
async def list_books_by_author(author: str) -> Envelope[List[Book]]:
    """Case-insensitive substring search on the author name."""
    return await BookService.list_books_by_author(author)


@router.get("/title/{title:path}", response_model=Envelope[List[Book]], summary="Search books by title")
async def list_books_by_title(title: str) -> Envelope[List[Book]]:
    """Case-insensitive substring search on the title."""
    return await BookService.list_books_by_title(title)


@router.get("/{book_id}", response_model=Envelope[Book], summary="Get a book by id")
async def get_book(book_id: int) -> Envelope[Book]:
    try:
        return await BookService.get_book(book_id)
    except BookstoreError as e:
        raise HTTPException(status_code=e.status_code, detail=e.message)
