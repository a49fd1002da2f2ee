"""
DynamoDB utilities for Bookstore API

Provides the BookStore handle that book operations use to read and write
the Books table.
"""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING, Any

from .errors import NotFoundError

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.service_resource import Table

logger = logging.getLogger()

BOOK_KEY = "ISBN"


class BookStore:
    """
    Single-item access to the Books table, keyed on ISBN.

    Wraps a table resource created once at process start. Storage errors
    (botocore ClientError and friends) are not caught here.
    """

    def __init__(self, table: "Table"):
        self.table = table

    def get(self, isbn: str) -> dict[str, Any] | None:
        """Return the book stored under ``isbn``, or None if there is none."""
        response = self.table.get_item(Key={BOOK_KEY: isbn})
        return response.get("Item")

    def fetch(self, isbn: str) -> dict[str, Any]:
        """
        Return the book stored under ``isbn``.

        Raises:
            NotFoundError: If no book is stored under it
        """
        book = self.get(isbn)
        if book is None:
            logger.warning(f"Book not found: {isbn}")
            raise NotFoundError(isbn)
        return book

    def put(self, book: dict[str, Any]) -> None:
        """Write ``book`` under its ISBN, replacing any item already there."""
        self.table.put_item(Item=book)

    def delete(self, isbn: str) -> None:
        self.table.delete_item(Key={BOOK_KEY: isbn})

    def scan_all(self) -> list[dict[str, Any]]:
        """
        Return every book in the table, in no particular order.

        DynamoDB pages scan results, so this follows LastEvaluatedKey until
        the scan is exhausted.
        """
        response = self.table.scan()
        items = response.get("Items", [])

        while "LastEvaluatedKey" in response:
            response = self.table.scan(ExclusiveStartKey=response["LastEvaluatedKey"])
            items.extend(response.get("Items", []))

        return items
