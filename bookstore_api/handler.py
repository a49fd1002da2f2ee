"""
Lambda handlers for Bookstore API

This module serves as the entry point for all Lambda functions.
It re-exports handlers from their respective modules for Lambda function configuration.

Architecture:
- API Gateway (HTTP API) -> Lambda -> DynamoDB (Books table, keyed on ISBN)

Handlers:
1. create_book_handler: POST /book - validates and stores a new book with a generated ISBN
2. get_book_handler: GET /book/{id} - returns one book
3. update_book_handler: PUT /book/{id} - replaces every field of an existing book
4. delete_book_handler: DELETE /book/{id} - removes an existing book
5. list_handler: GET /books - returns every book
"""

# Re-export handlers for Lambda function configuration
# Support both local development (bookstore_api.X) and Lambda deployment (X)
try:
    # Lambda deployment (files are in root, not in bookstore_api/)
    from handlers.book_handlers import (
        create_book_handler,
        delete_book_handler,
        get_book_handler,
        list_handler,
        update_book_handler,
    )
    from config import books_table
except ImportError:
    # Local development / testing (with bookstore_api package structure)
    from bookstore_api.handlers.book_handlers import (
        create_book_handler,
        delete_book_handler,
        get_book_handler,
        list_handler,
        update_book_handler,
    )
    from bookstore_api.config import books_table

# Make handlers available at module level for Lambda
__all__ = [
    "create_book_handler",
    "get_book_handler",
    "update_book_handler",
    "delete_book_handler",
    "list_handler",
    # Also export config for tests
    "books_table",
]
