"""
Lambda handlers for book CRUD operations (create, get, update, delete, list)

Each operation takes a BookStore and the API Gateway event, and raises one of
the BookApiError types for input the caller got wrong. The *_handler
functions are the Lambda entry points: they build the store from the shared
table and turn the result or error into an API Gateway response.
"""

from __future__ import annotations

import uuid
from typing import Any

# Support both Lambda deployment and local development
try:
    # Lambda deployment
    import config
    from utils.dynamodb import BOOK_KEY, BookStore
    from utils.errors import BookApiError
    from utils.response import api_response, error_response, server_error_response, text_response
    from utils.validation import get_path_param, parse_json_body, validate_book
except ImportError:
    # Local development
    import bookstore_api.config as config
    from bookstore_api.utils.dynamodb import BOOK_KEY, BookStore
    from bookstore_api.utils.errors import BookApiError
    from bookstore_api.utils.response import (
        api_response,
        error_response,
        server_error_response,
        text_response,
    )
    from bookstore_api.utils.validation import get_path_param, parse_json_body, validate_book

logger = config.get_logger()

DELETED_MESSAGE = "Record deleted successfully "


def _book_store() -> BookStore:
    return BookStore(config.books_table)


def create_book(store: BookStore, event: dict) -> dict[str, Any]:
    """
    Validate the request body and store it as a new book.

    The ISBN is always generated here; one sent by the client is ignored.
    There is no check for an existing item under the new ISBN.

    Returns:
        dict: The stored book
    """
    fields = validate_book(parse_json_body(event))

    book = {**fields, BOOK_KEY: str(uuid.uuid4())}
    store.put(book)

    logger.info(f"Created book: {book[BOOK_KEY]}")
    return book


def get_book(store: BookStore, event: dict) -> dict[str, Any]:
    return store.fetch(get_path_param(event, "id"))


def update_book(store: BookStore, event: dict) -> dict[str, Any]:
    """
    Replace every field of an existing book with the request body.

    Existence is checked before the body is looked at, so an unknown ISBN
    is a 404 whatever the body holds.

    Returns:
        dict: The book as now stored
    """
    isbn = get_path_param(event, "id")
    store.fetch(isbn)

    fields = validate_book(parse_json_body(event))

    book = {**fields, BOOK_KEY: isbn}
    store.put(book)

    logger.info(f"Updated book: {isbn}")
    return book


def delete_book(store: BookStore, event: dict) -> None:
    isbn = get_path_param(event, "id")
    store.fetch(isbn)
    store.delete(isbn)
    logger.info(f"Deleted book: {isbn}")


def list_books(store: BookStore) -> list[dict[str, Any]]:
    books = store.scan_all()
    logger.info(f"Retrieved {len(books)} books from DynamoDB")
    return books


def create_book_handler(event, context):
    """
    Lambda handler for POST /book.
    Returns 201 with the stored book, including its generated ISBN.
    """
    logger.info("create_book_handler invoked")

    try:
        book = create_book(_book_store(), event)
        return api_response(201, book)
    except BookApiError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Error creating book: {str(e)}", exc_info=True)
        return server_error_response()


def get_book_handler(event, context):
    """
    Lambda handler for GET /book/{id}.
    Returns 200 with the book, or 404 if no book has that ISBN.
    """
    logger.info("get_book_handler invoked")

    try:
        book = get_book(_book_store(), event)
        return api_response(200, book)
    except BookApiError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Error getting book: {str(e)}", exc_info=True)
        return server_error_response()


def update_book_handler(event, context):
    """
    Lambda handler for PUT /book/{id}.
    Returns 200 with the replaced book.
    """
    logger.info("update_book_handler invoked")

    try:
        book = update_book(_book_store(), event)
        return api_response(200, book)
    except BookApiError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Error updating book: {str(e)}", exc_info=True)
        return server_error_response()


def delete_book_handler(event, context):
    """
    Lambda handler for DELETE /book/{id}.
    Returns 204 with a plain text confirmation.
    """
    logger.info("delete_book_handler invoked")

    try:
        delete_book(_book_store(), event)
        return text_response(204, DELETED_MESSAGE)
    except BookApiError as e:
        return error_response(e)
    except Exception as e:
        logger.error(f"Error deleting book: {str(e)}", exc_info=True)
        return server_error_response()


def list_handler(event, context):
    """
    Lambda handler for GET /books.
    Returns 200 with a JSON array of every book, unordered.
    """
    logger.info("list_handler invoked")

    try:
        books = list_books(_book_store())
        return api_response(200, books)
    except Exception as e:
        logger.error(f"Error listing books: {str(e)}", exc_info=True)
        return server_error_response()
