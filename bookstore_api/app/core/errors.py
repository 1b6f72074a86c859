"""
Error taxonomy shared by the services, the HTTP layer and the client.

Every service operation either returns its result envelope or raises
exactly one of the errors below.  They derive from ``ValueError`` so
callers that only care about "the request was rejected" can keep catching
that.  ``status_code`` is the HTTP status the API answers with.
"""

from typing import Dict, Optional, Type


class BookstoreError(ValueError):
    """Base class for rejected bookstore operations."""

    status_code: int = 400
    default_message: str = "Request rejected"

    def __init__(self, message: Optional[str] = None) -> None:
        self.message = message or self.default_message
        super().__init__(self.message)


class NotFoundError(BookstoreError):
    """The referenced book or review does not exist."""

    status_code = 404
    default_message = "Not found"


class ConflictError(BookstoreError):
    """Username or email already taken."""

    status_code = 409
    default_message = "User already exists"


class UnauthorizedError(BookstoreError):
    """Bad credentials, or no authenticated identity for a mutating call."""

    status_code = 401
    default_message = "Not authenticated"


class ForbiddenError(BookstoreError):
    """Authenticated, but not the owner of the resource."""

    status_code = 403
    default_message = "Forbidden"


class ValidationError(BookstoreError):
    """Input failed the trivial checks (blank fields, rating range)."""

    status_code = 422
    default_message = "Invalid input"


ERRORS_BY_STATUS: Dict[int, Type[BookstoreError]] = {
    cls.status_code: cls
    for cls in (NotFoundError, ConflictError, UnauthorizedError, ForbiddenError, ValidationError)
}


def error_for_status(status_code: Optional[int], message: str) -> BookstoreError:
    """Build the error matching an HTTP status (``BookstoreError`` if unknown)."""
    cls = ERRORS_BY_STATUS.get(status_code, BookstoreError) if status_code else BookstoreError
    return cls(message)
