"""
Pydantic schema definitions for API payloads.

Each domain (books, reviews, users) defines its own models for request and
response bodies.  The same models are used by the services, so the
in-process and HTTP entry points return identical shapes.
"""
