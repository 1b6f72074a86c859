"""
Top-level package for the Bookstore API.

Makes ``bookstore_api`` importable so that modules within ``app`` can be
addressed with fully qualified names such as ``bookstore_api.app.main``.
All functionality lives in submodules under ``app``.
"""

__all__ = []
