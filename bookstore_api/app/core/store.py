"""
In-memory stores backing the bookstore services.

There is no database: the catalog, the reviews, the users and the current
session live in process memory and are rebuilt from the seed data below
on every start.  Nothing survives a restart.

Only the service classes in ``app.services`` may touch these stores.  Each
store owns one re-entrant lock; services hold it across a whole
read-modify-write sequence (uniqueness check and append, scan and
replace-or-append, scan and remove) so the sequence stays atomic even if
the services are called from worker threads.

Identifiers come from a counter owned by each store.  Unlike "current
length + 1" they are never reused after a delete.
"""

import datetime
import logging
import threading
from dataclasses import dataclass
from decimal import Decimal
from typing import Iterator, List, Optional

from .security import hash_password
from ..schemas.book import Book
from ..schemas.review import Review
from ..schemas.user import SessionUser

logger = logging.getLogger(__name__)


SEED_BOOKS = [
    {
        "id": 1,
        "isbn": "9781234567897",
        "title": "The Great Novel",
        "author": "Jane Doe",
        "year": 2020,
        "price": Decimal("14.99"),
        "cover_image": "https://picsum.photos/seed/book1/300/400",
        "description": "A fascinating journey through imagination and reality.",
    },
    {
        "id": 2,
        "isbn": "9789876543210",
        "title": "Code Warriors",
        "author": "John Smith",
        "year": 2019,
        "price": Decimal("12.99"),
        "cover_image": "https://picsum.photos/seed/book2/300/400",
        "description": "The epic tale of programmers fighting against bugs and deadlines.",
    },
    {
        "id": 3,
        "isbn": "9780123456789",
        "title": "Digital Dreams",
        "author": "Sarah Johnson",
        "year": 2021,
        "price": Decimal("18.99"),
        "cover_image": "https://picsum.photos/seed/book3/300/400",
        "description": "How technology is shaping our future and our minds.",
    },
    {
        "id": 4,
        "isbn": "9785432109876",
        "title": "The Last Algorithm",
        "author": "John Smith",
        "year": 2022,
        "price": Decimal("19.99"),
        "cover_image": "https://picsum.photos/seed/book4/300/400",
        "description": "When AI evolves beyond human understanding.",
    },
    {
        "id": 5,
        "isbn": "9787890123456",
        "title": "Lost in Recursion",
        "author": "Alan Turing",
        "year": 2018,
        "price": Decimal("15.99"),
        "cover_image": "https://picsum.photos/seed/book5/300/400",
        "description": "A programmer's nightmare turned into an adventure.",
    },
]

SEED_REVIEWS = [
    {
        "id": 1,
        "book_id": 1,
        "user_id": 1,
        "username": "user1",
        "rating": 4,
        "comment": "Great book, highly recommend!",
        "date": datetime.date(2023, 1, 15),
    },
    {
        "id": 2,
        "book_id": 2,
        "user_id": 2,
        "username": "user2",
        "rating": 5,
        "comment": "One of the best coding books I've read",
        "date": datetime.date(2023, 2, 20),
    },
]

# Plaintext only here; the store keeps PBKDF2 hashes.
SEED_USERS = [
    {"id": 1, "username": "user1", "email": "user1@example.com", "password": "password123"},
    {"id": 2, "username": "user2", "email": "user2@example.com", "password": "password456"},
]


@dataclass
class UserRecord:
    """A stored user.  ``password_hash`` never leaves the store layer."""

    id: int
    username: str
    email: str
    password_hash: str


class CatalogStore:
    """Read-only list of books, in seed order."""

    def __init__(self, books: List[Book]) -> None:
        self._books = list(books)

    def __iter__(self) -> Iterator[Book]:
        return iter(self._books)

    def __len__(self) -> int:
        return len(self._books)

    def get(self, book_id: int) -> Optional[Book]:
        return next((b for b in self._books if b.id == book_id), None)

    def get_by_isbn(self, isbn: str) -> Optional[Book]:
        return next((b for b in self._books if b.isbn == isbn), None)


class ReviewStore:
    """Mutable list of reviews, in insertion order."""

    def __init__(self, reviews: List[Review]) -> None:
        self.lock = threading.RLock()
        self._reviews = list(reviews)
        self._next_id = max((r.id for r in self._reviews), default=0) + 1

    def __iter__(self) -> Iterator[Review]:
        return iter(list(self._reviews))

    def __len__(self) -> int:
        return len(self._reviews)

    def get(self, review_id: int) -> Optional[Review]:
        return next((r for r in self._reviews if r.id == review_id), None)

    def find_for(self, book_id: int, user_id: int) -> Optional[Review]:
        return next(
            (r for r in self._reviews if r.book_id == book_id and r.user_id == user_id),
            None,
        )

    def for_book(self, book_id: int) -> List[Review]:
        return [r for r in self._reviews if r.book_id == book_id]

    def add(self, **fields) -> Review:
        with self.lock:
            review = Review(id=self._next_id, **fields)
            self._next_id += 1
            self._reviews.append(review)
            return review

    def remove(self, review_id: int) -> Optional[Review]:
        with self.lock:
            review = self.get(review_id)
            if review is not None:
                self._reviews = [r for r in self._reviews if r.id != review_id]
            return review


class UserStore:
    """Registered users.  Users are only ever appended."""

    def __init__(self, users: List[UserRecord]) -> None:
        self.lock = threading.RLock()
        self._users = list(users)
        self._next_id = max((u.id for u in self._users), default=0) + 1

    def __len__(self) -> int:
        return len(self._users)

    def get(self, user_id: int) -> Optional[UserRecord]:
        return next((u for u in self._users if u.id == user_id), None)

    def get_by_email(self, email: str) -> Optional[UserRecord]:
        return next((u for u in self._users if u.email == email), None)

    def exists(self, username: str, email: str) -> bool:
        """True if either the username or the email is already taken."""
        return any(u.username == username or u.email == email for u in self._users)

    def add(self, username: str, email: str, password_hash: str) -> UserRecord:
        with self.lock:
            user = UserRecord(
                id=self._next_id,
                username=username,
                email=email,
                password_hash=password_hash,
            )
            self._next_id += 1
            self._users.append(user)
            return user


class SessionState:
    """The identity currently logged in for this process, if any."""

    def __init__(self) -> None:
        self.lock = threading.RLock()
        self.user: Optional[SessionUser] = None

    def set(self, user: SessionUser) -> None:
        with self.lock:
            self.user = user

    def clear(self) -> None:
        with self.lock:
            self.user = None


class Store:
    """Container for the four stores, built from the seed data."""

    def __init__(self) -> None:
        self.catalog = CatalogStore([Book(**b) for b in SEED_BOOKS])
        self.reviews = ReviewStore([Review(**r) for r in SEED_REVIEWS])
        self.users = UserStore(
            [
                UserRecord(
                    id=u["id"],
                    username=u["username"],
                    email=u["email"],
                    password_hash=hash_password(u["password"]),
                )
                for u in SEED_USERS
            ]
        )
        self.session = SessionState()


_store: Optional[Store] = None
_store_lock = threading.Lock()


def get_store() -> Store:
    """Return the process-wide store, seeding it on first use."""
    global _store
    with _store_lock:
        if _store is None:
            _store = Store()
            logger.info(
                "Seeded store with %d books, %d reviews and %d users",
                len(_store.catalog),
                len(_store.reviews),
                len(_store.users),
            )
        return _store


def init_store() -> None:
    """Make sure the store exists.  Called on application start-up."""
    get_store()


def reset_store() -> Store:
    """Drop all runtime changes and rebuild the store from the seed data."""
    global _store
    with _store_lock:
        _store = None
    return get_store()
