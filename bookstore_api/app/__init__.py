"""
Application package initializer.

The API is split by concern: ``core`` holds configuration, logging,
security, the error taxonomy and the in-memory stores; ``services`` holds
the business logic; ``schemas`` the pydantic models; ``api`` the versioned
routers.  Each domain (books, users, reviews) exposes a router defined in
``api/v1/endpoints``.
"""

from .main import app  # noqa: F401
