import pytest

from bookstore_api.app.core.errors import NotFoundError, ValidationError
from bookstore_api.app.services import BookService


@pytest.mark.asyncio
async def test_list_books_keeps_catalog_order():
    result = await BookService.list_books()
    assert [b.id for b in result.data] == [1, 2, 3, 4, 5]
    assert result.data[0].title == "The Great Novel"


@pytest.mark.asyncio
async def test_get_book_by_isbn():
    result = await BookService.get_book_by_isbn("9789876543210")
    assert result.data.title == "Code Warriors"
    assert result.data.author == "John Smith"


@pytest.mark.asyncio
async def test_get_book_by_unknown_isbn_is_not_found():
    with pytest.raises(NotFoundError):
        await BookService.get_book_by_isbn("0000000000000")


@pytest.mark.asyncio
async def test_get_book_by_empty_isbn_is_rejected():
    with pytest.raises(ValidationError):
        await BookService.get_book_by_isbn("")


@pytest.mark.asyncio
@pytest.mark.parametrize("query", ["john", "JOHN", "Smith", "hn sm"])
async def test_author_search_is_case_insensitive_substring(query):
    result = await BookService.list_books_by_author(query)
    assert [b.title for b in result.data] == ["Code Warriors", "The Last Algorithm"]


@pytest.mark.asyncio
async def test_title_search():
    result = await BookService.list_books_by_title("code")
    assert [b.id for b in result.data] == [2]


@pytest.mark.asyncio
async def test_search_without_match_is_empty_success():
    result = await BookService.list_books_by_title("cookbook")
    assert result.data == []


@pytest.mark.asyncio
async def test_empty_query_matches_every_book():
    by_author = await BookService.list_books_by_author("")
    by_title = await BookService.list_books_by_title("")
    assert len(by_author.data) == 5
    assert len(by_title.data) == 5


@pytest.mark.asyncio
async def test_get_book_by_id():
    result = await BookService.get_book(3)
    assert result.data.isbn == "9780123456789"
    with pytest.raises(NotFoundError):
        await BookService.get_book(42)
