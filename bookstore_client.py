"""Bookstore API client.

This module defines a thin client around the Bookstore HTTP API.  It offers
the four catalog reads the storefront's demo page uses:

* :meth:`BookstoreClient.get_all_books` – every book in the shop.
* :meth:`BookstoreClient.get_book_by_isbn` – a single book by ISBN.
* :meth:`BookstoreClient.get_books_by_author` – books whose author matches.
* :meth:`BookstoreClient.get_books_by_title` – books whose title matches.

The client adds no logic of its own: it calls the matching route, unwraps
the ``{"data": ...}`` envelope and returns the payload.  A failed call is
logged once and raised as the same error class the services use
(``NotFoundError`` for a 404, and so on).  There are no retries and no
client-side timeout; callers that give up simply abandon the call.

Run it as a script to replay the demo against a running server::

    python bookstore_client.py --base-url http://127.0.0.1:8000/api/v1
"""

from __future__ import annotations

import argparse
import logging
from typing import Any, Dict, List, Optional, Tuple
from urllib.parse import quote

import requests

from bookstore_api.app.core.errors import BookstoreError, error_for_status


logger = logging.getLogger(__name__)

DEFAULT_BASE_URL = "http://127.0.0.1:8000/api/v1"


class BookstoreClient:
    """Client for the catalog routes of the Bookstore API."""

    def __init__(
        self,
        *,
        base_url: str = DEFAULT_BASE_URL,
        api_key: Optional[str] = None,
        session: Optional[requests.Session] = None,
    ) -> None:
        """Initialise the API client.

        Args:
            base_url: Base URL of the API including the version prefix,
                e.g. ``http://127.0.0.1:8000/api/v1``.
            api_key: Optional bearer token.  If set, it is sent as
                ``Authorization: Bearer <api_key>`` with every request.
            session: Optional requests session (or any object with a
                compatible ``request`` method).  Created if omitted.
        """
        self.base_url = base_url.rstrip("/")
        self.api_key = api_key
        self.session = session or requests.Session()

    # ------------------------------------------------------------------
    # Low level HTTP helpers
    # ------------------------------------------------------------------
    def _request(
        self, method: str, path: str, *, params: Dict[str, Any] | None = None,
        json_body: Any | None = None
    ) -> Tuple[Optional[Any], Optional[Dict[str, Any]]]:
        """Perform an HTTP request to the API.

        Args:
            method: HTTP method (``GET``, ``POST``, ``DELETE``, ...).
            path: Path relative to :attr:`base_url` (e.g. ``/books``).
            params: Query parameters to include in the request.
            json_body: JSON body to send with the request.
        Returns:
            A tuple ``(data, error)``.  ``data`` holds the parsed JSON
            response on success and ``error`` is ``None``.  On failure
            ``data`` is ``None`` and ``error`` is a dictionary with keys
            ``status_code`` and ``message``.
        """
        url = f"{self.base_url}{path}"
        headers: Dict[str, str] = {}
        if self.api_key:
            headers["Authorization"] = f"Bearer {self.api_key}"
        try:
            logger.debug("Sending %s request to %s", method, url)
            response = self.session.request(
                method=method,
                url=url,
                params=params,
                json=json_body,
                headers=headers,
            )
        except requests.RequestException as exc:
            return None, {"status_code": None, "message": str(exc)}
        if response.status_code >= 400:
            try:
                err_json = response.json()
            except ValueError:
                err_json = None
            if isinstance(err_json, dict):
                message = err_json.get("detail") or err_json.get("message") or err_json
            else:
                message = response.text
            if not isinstance(message, str):
                # 422 bodies carry a list of validation problems
                message = str(message)
            return None, {"status_code": response.status_code, "message": message or f"HTTP {response.status_code}"}
        if response.content:
            return response.json(), None
        return None, None

    def _get_data(self, path: str, description: str) -> Any:
        data, error = self._request("GET", path)
        if error:
            logger.error("Failed to fetch %s (%s): %s", description, error["status_code"], error["message"])
            raise error_for_status(error["status_code"], error["message"])
        logger.info("Successfully fetched %s", description)
        return data["data"] if isinstance(data, dict) and "data" in data else data

    # ------------------------------------------------------------------
    # Catalog operations
    # ------------------------------------------------------------------
    def get_all_books(self) -> List[Dict[str, Any]]:
        """Return every book in the shop."""
        return self._get_data("/books", "all books")

    def get_book_by_isbn(self, isbn: str) -> Dict[str, Any]:
        """Return the book with this ISBN.  Raises ``NotFoundError`` if absent."""
        return self._get_data(f"/books/isbn/{quote(isbn, safe='')}", f"book with ISBN {isbn}")

    def get_books_by_author(self, author: str) -> List[Dict[str, Any]]:
        """Return the books whose author contains ``author`` (any case)."""
        return self._get_data(f"/books/author/{quote(author, safe='')}", f"books by author {author}")

    def get_books_by_title(self, title: str) -> List[Dict[str, Any]]:
        """Return the books whose title contains ``title`` (any case)."""
        return self._get_data(f"/books/title/{quote(title, safe='')}", f"books with title {title}")


def execute_example(client: BookstoreClient) -> Dict[str, Any]:
    """Run the four catalog calls against the seed data and collect results.

    Each call is independent: a failure is recorded under its key as the
    raised error and the remaining calls still run.
    """
    calls = {
        "all_books": lambda: client.get_all_books(),
        "book_by_isbn": lambda: client.get_book_by_isbn("9781234567897"),
        "books_by_author": lambda: client.get_books_by_author("John Smith"),
        "books_by_title": lambda: client.get_books_by_title("Code"),
    }
    results: Dict[str, Any] = {}
    for name, call in calls.items():
        try:
            results[name] = call()
        except BookstoreError as exc:
            results[name] = exc
    return results


def main(argv: Optional[List[str]] = None) -> int:
    ap = argparse.ArgumentParser(description="Query the Bookstore API catalog.")
    ap.add_argument("--base-url", default=DEFAULT_BASE_URL, help="API base URL including /api/v1")
    ap.add_argument(
        "--method",
        choices=["example", "all", "isbn", "author", "title"],
        default="example",
        help="Which lookup to run (default: the full demo)",
    )
    ap.add_argument("--query", default="", help="ISBN, author or title to search for")
    args = ap.parse_args(argv)

    logging.basicConfig(level=logging.INFO, format="%(asctime)s [%(levelname)s] %(message)s")
    client = BookstoreClient(base_url=args.base_url)

    if args.method == "example":
        for name, result in execute_example(client).items():
            print(f"{name}: {result}")
        return 0
    if args.method != "all" and not args.query:
        ap.error(f"--query is required for --method {args.method}")
    lookups = {
        "all": lambda: client.get_all_books(),
        "isbn": lambda: client.get_book_by_isbn(args.query),
        "author": lambda: client.get_books_by_author(args.query),
        "title": lambda: client.get_books_by_title(args.query),
    }
    try:
        print(lookups[args.method]())
    except BookstoreError as exc:
        print(f"[!] {exc}")
        return 1
    return 0


if __name__ == "__main__":
    raise SystemExit(main())
