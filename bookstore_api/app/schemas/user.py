"""
Pydantic models for user data.

Defines schemas for registering, logging in and reading users.  Passwords
are accepted on input only; no response schema carries them.
"""

from pydantic import Field

from .common import CamelModel


class UserCreate(CamelModel):
    """Schema for registering a user."""

    username: str = Field(..., min_length=1, examples=["user3"])
    email: str = Field(..., min_length=1, examples=["user3@example.com"])
    password: str = Field(..., min_length=1, examples=["strongpassword"])


class UserLogin(CamelModel):
    """Credentials for ``POST /users/login``."""

    email: str = Field(..., min_length=1, examples=["user1@example.com"])
    password: str = Field(..., min_length=1, examples=["password123"])


class UserRead(CamelModel):
    """Schema for reading a user from the API."""

    id: int
    username: str
    email: str


class SessionUser(CamelModel):
    """The authenticated identity: what a session remembers about a user."""

    id: int
    username: str


class LoginResponse(CamelModel):
    """Login result: the user envelope plus a bearer token for the HTTP API."""

    data: UserRead
    access_token: str
    token_type: str = "bearer"
