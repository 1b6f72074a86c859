import datetime

import pytest

from bookstore_api.app.core.errors import (
    ForbiddenError,
    NotFoundError,
    UnauthorizedError,
    ValidationError,
)
from bookstore_api.app.schemas.user import SessionUser
from bookstore_api.app.services import ReviewService, UserService


async def login_user1():
    await UserService.login("user1@example.com", "password123")


async def login_user2():
    await UserService.login("user2@example.com", "password456")


@pytest.mark.asyncio
async def test_list_reviews_for_book():
    result = await ReviewService.list_reviews_for_book(1)
    assert len(result.data) == 1
    review = result.data[0]
    assert (review.id, review.user_id, review.username, review.rating) == (1, 1, "user1", 4)
    assert review.date == datetime.date(2023, 1, 15)

    assert (await ReviewService.list_reviews_for_book(5)).data == []


@pytest.mark.asyncio
async def test_upsert_requires_session(store):
    with pytest.raises(UnauthorizedError):
        await ReviewService.upsert_review(3, 5, "Loved it")
    assert len(store.reviews) == 2


@pytest.mark.asyncio
async def test_first_upsert_inserts_review():
    await login_user1()
    result = await ReviewService.upsert_review(3, 5, "Loved it")
    review = result.data
    assert review.id == 3
    assert review.book_id == 3
    assert review.user_id == 1
    assert review.username == "user1"
    assert review.date == datetime.date.today()

    listed = (await ReviewService.list_reviews_for_book(3)).data
    assert [r.id for r in listed] == [3]


@pytest.mark.asyncio
async def test_second_upsert_updates_in_place(store):
    await login_user1()
    first = (await ReviewService.upsert_review(3, 2, "Meh")).data
    second = (await ReviewService.upsert_review(3, 5, "Grew on me")).data

    assert second.id == first.id
    assert second.username == "user1"
    assert (second.rating, second.comment) == (5, "Grew on me")
    mine = [r for r in store.reviews if r.book_id == 3 and r.user_id == 1]
    assert len(mine) == 1
    assert mine[0].rating == 5


@pytest.mark.asyncio
async def test_upsert_updates_seed_review():
    await login_user1()
    result = await ReviewService.upsert_review(1, 2, "Changed my mind")
    assert result.data.id == 1
    assert result.data.date == datetime.date.today()
    reviews = (await ReviewService.list_reviews_for_book(1)).data
    assert len(reviews) == 1
    assert reviews[0].comment == "Changed my mind"


@pytest.mark.asyncio
async def test_many_upserts_leave_one_review_per_pair(store):
    await login_user2()
    for rating in (1, 2, 3, 4, 5, 3):
        await ReviewService.upsert_review(4, rating, f"take {rating}")
    pairs = [(r.book_id, r.user_id) for r in store.reviews]
    assert len(pairs) == len(set(pairs))
    assert pairs.count((4, 2)) == 1


@pytest.mark.asyncio
async def test_upsert_validates_input():
    await login_user1()
    with pytest.raises(ValidationError):
        await ReviewService.upsert_review(3, 0, "Too low")
    with pytest.raises(ValidationError):
        await ReviewService.upsert_review(3, 6, "Too high")
    with pytest.raises(ValidationError):
        await ReviewService.upsert_review(3, 4, "   ")
    with pytest.raises(NotFoundError):
        await ReviewService.upsert_review(99, 4, "No such book")


@pytest.mark.asyncio
async def test_explicit_identity_overrides_session():
    await login_user1()
    result = await ReviewService.upsert_review(
        5, 3, "From user2", current_user=SessionUser(id=2, username="user2")
    )
    assert result.data.user_id == 2
    assert result.data.username == "user2"


@pytest.mark.asyncio
@pytest.mark.parametrize(
    "identity",
    [SessionUser(id=999, username="ghost"), SessionUser(id=1, username="user2")],
)
async def test_unregistered_identity_is_rejected(store, identity):
    with pytest.raises(UnauthorizedError):
        await ReviewService.upsert_review(1, 5, "ghost", current_user=identity)
    with pytest.raises(UnauthorizedError):
        await ReviewService.delete_review(1, current_user=identity)
    assert [r.id for r in store.reviews] == [1, 2]
    assert store.reviews.get(1).comment == "Great book, highly recommend!"


@pytest.mark.asyncio
async def test_delete_own_review_returns_snapshot(store):
    await login_user1()
    result = await ReviewService.delete_review(1)
    assert result.data.id == 1
    assert result.data.comment == "Great book, highly recommend!"
    assert store.reviews.get(1) is None
    assert store.reviews.get(2) is not None


@pytest.mark.asyncio
async def test_delete_someone_elses_review_is_forbidden(store):
    await login_user1()
    before = [r.model_dump() for r in store.reviews]
    with pytest.raises(ForbiddenError):
        await ReviewService.delete_review(2)
    assert [r.model_dump() for r in store.reviews] == before


@pytest.mark.asyncio
async def test_delete_requires_session_and_existing_review():
    with pytest.raises(UnauthorizedError):
        await ReviewService.delete_review(1)
    await login_user1()
    with pytest.raises(NotFoundError):
        await ReviewService.delete_review(77)


@pytest.mark.asyncio
async def test_ids_are_not_reused_after_delete(store):
    await login_user1()
    await ReviewService.delete_review(1)
    # one review left: "length + 1" would hand out id 2 a second time
    added = (await ReviewService.upsert_review(3, 4, "New one")).data
    another = (await ReviewService.upsert_review(4, 4, "And another")).data
    ids = [r.id for r in store.reviews]
    assert len(ids) == len(set(ids))
    assert added.id == 3
    assert another.id == 4


@pytest.mark.asyncio
async def test_returned_reviews_are_copies(store):
    listed = (await ReviewService.list_reviews_for_book(1)).data
    listed[0].rating = 1
    assert store.reviews.get(1).rating == 4
