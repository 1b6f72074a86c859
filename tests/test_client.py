import pytest

from bookstore_api.app.core.errors import (
    BookstoreError,
    ConflictError,
    NotFoundError,
    error_for_status,
)
from bookstore_client import BookstoreClient, execute_example


@pytest.fixture
def bookstore(client):
    # TestClient speaks the same request() interface as requests.Session
    return BookstoreClient(base_url="http://testserver/api/v1", session=client)


def test_get_all_books(bookstore):
    books = bookstore.get_all_books()
    assert [b["id"] for b in books] == [1, 2, 3, 4, 5]


def test_get_book_by_isbn(bookstore):
    assert bookstore.get_book_by_isbn("9787890123456")["title"] == "Lost in Recursion"


def test_missing_isbn_raises_not_found(bookstore):
    with pytest.raises(NotFoundError, match="Book not found"):
        bookstore.get_book_by_isbn("0000000000000")


def test_searches(bookstore):
    assert len(bookstore.get_books_by_author("John Smith")) == 2
    assert [b["title"] for b in bookstore.get_books_by_title("recursion")] == ["Lost in Recursion"]
    assert bookstore.get_books_by_title("no such title") == []


def test_empty_search_returns_every_book(bookstore):
    assert [b["id"] for b in bookstore.get_books_by_author("")] == [1, 2, 3, 4, 5]
    assert [b["id"] for b in bookstore.get_books_by_title("")] == [1, 2, 3, 4, 5]


def test_execute_example(bookstore):
    results = execute_example(bookstore)
    assert len(results["all_books"]) == 5
    assert results["book_by_isbn"]["title"] == "The Great Novel"
    assert len(results["books_by_author"]) == 2
    assert [b["title"] for b in results["books_by_title"]] == ["Code Warriors"]


def test_error_for_status_maps_known_codes():
    assert isinstance(error_for_status(404, "gone"), NotFoundError)
    assert isinstance(error_for_status(409, "taken"), ConflictError)
    unknown = error_for_status(500, "boom")
    assert type(unknown) is BookstoreError
    assert str(unknown) == "boom"
    assert type(error_for_status(None, "offline")) is BookstoreError
