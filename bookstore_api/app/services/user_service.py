"""
Business logic for users and the process session.

Users live in the in-memory ``UserStore``; passwords are kept as salted
PBKDF2 hashes (see ``core.security``).  Logging in stores ``{id, username}``
as the process-wide session that review operations fall back to when no
explicit identity is passed.  The HTTP API does not rely on that session:
it resolves every request's identity from its bearer token.
"""

import logging
from typing import Optional

from ..core.errors import ConflictError, UnauthorizedError, ValidationError
from ..core.security import hash_password, verify_password
from ..core.store import get_store
from ..schemas.common import Envelope
from ..schemas.user import SessionUser, UserRead


class UserService:
    """Registration, login and the current session."""

    @classmethod
    async def register(cls, username: str, email: str, password: str) -> Envelope[UserRead]:
        """Register a new user.

        All three fields must be non-empty.  The username and the email must
        both be unused, otherwise ``ConflictError`` is raised and the store
        is left untouched.  The response echoes id, username and email only.
        """
        logger = logging.getLogger(__name__)
        if not (username.strip() and email.strip() and password):
            raise ValidationError("Username, email and password are required")
        users = get_store().users
        with users.lock:
            if users.exists(username, email):
                logger.info("Registration rejected for %s: user already exists", email)
                raise ConflictError("User already exists")
            user = users.add(username, email, hash_password(password))
        logger.info("Registered user %s (id=%s)", user.username, user.id)
        return Envelope[UserRead](
            data=UserRead(id=user.id, username=user.username, email=user.email)
        )

    @classmethod
    async def authenticate(cls, email: str, password: str) -> Optional[UserRead]:
        """Check credentials without touching the session.

        Returns the user if ``email`` matches a user exactly and ``password``
        verifies against the stored hash, otherwise ``None``.
        """
        return cls._check_credentials(email, password)

    @classmethod
    async def login(cls, email: str, password: str) -> Envelope[UserRead]:
        """Authenticate and make the user the current session.

        Raises ``UnauthorizedError`` when no user matches both fields; the
        previous session, if any, is kept in that case.
        """
        logger = logging.getLogger(__name__)
        if not (email and password):
            raise ValidationError("Email and password are required")
        user = cls._check_credentials(email, password)
        if user is None:
            logger.warning("Failed login attempt for %s", email)
            raise UnauthorizedError("Invalid credentials")
        get_store().session.set(SessionUser(id=user.id, username=user.username))
        logger.info("User %s logged in", user.username)
        return Envelope[UserRead](data=user)

    @classmethod
    async def logout(cls) -> None:
        """Clear the current session.  Never fails."""
        session = get_store().session
        if session.user is not None:
            logging.getLogger(__name__).info("User %s logged out", session.user.username)
        session.clear()

    @classmethod
    async def get_current_user(cls) -> Optional[SessionUser]:
        """Return the current session, or ``None`` when nobody is logged in."""
        user = get_store().session.user
        return user.model_copy() if user is not None else None

    @staticmethod
    def _check_credentials(email: str, password: str) -> Optional[UserRead]:
        users = get_store().users
        with users.lock:
            user = users.get_by_email(email)
            if user is None or not verify_password(password, user.password_hash):
                return None
            return UserRead(id=user.id, username=user.username, email=user.email)

    @classmethod
    async def identity_for_email(cls, email: str) -> Optional[SessionUser]:
        """Map a token subject back to an identity (``None`` if unknown)."""
        user = get_store().users.get_by_email(email)
        if user is None:
            return None
        return SessionUser(id=user.id, username=user.username)
