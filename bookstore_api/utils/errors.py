"""
Error types for Bookstore API

Each error knows the HTTP status and body it is reported with, so handlers
convert any of them to a response in one place.
"""

from __future__ import annotations

from typing import Any


class BookApiError(Exception):
    """Base class for errors reported to the caller as a structured response."""

    status_code = 500

    def to_body(self) -> dict[str, Any]:
        return {"error": str(self)}


class MalformedBodyError(BookApiError):
    """Request body is not parseable JSON."""

    status_code = 400

    def __init__(self, parser_message: str):
        super().__init__(f'invalid request body format : "{parser_message}"')
        self.parser_message = parser_message


class ValidationError(BookApiError):
    """Request body parsed but broke one or more schema rules."""

    status_code = 400

    def __init__(self, errors: list[str]):
        super().__init__("; ".join(errors))
        self.errors = list(errors)

    def to_body(self) -> dict[str, Any]:
        return {"errors": self.errors}


class NotFoundError(BookApiError):
    """No book is stored under the requested ISBN."""

    status_code = 404

    def __init__(self, isbn: str | None = None):
        super().__init__("not found")
        self.isbn = isbn
