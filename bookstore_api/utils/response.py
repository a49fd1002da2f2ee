"""
Response building utilities for Bookstore API

Provides functions to create standardized API Gateway responses.
"""

from __future__ import annotations

import json
from decimal import Decimal
from typing import Any

from .errors import BookApiError

CORS_HEADERS = {
    "Access-Control-Allow-Origin": "*",
    "Access-Control-Allow-Headers": "Content-Type,Authorization",
    "Access-Control-Allow-Methods": "GET, POST, PUT, DELETE, OPTIONS",
}


def convert_decimal(value: Any) -> Any:
    """
    Convert Decimal types (from DynamoDB) to int or float for JSON serialization.

    Used as the ``default`` hook of ``json.dumps``.

    Args:
        value: Value that might be a Decimal

    Returns:
        Converted value (int if whole number, otherwise float)

    Raises:
        TypeError: For any other type json cannot serialize
    """
    if isinstance(value, Decimal):
        return int(value) if value % 1 == 0 else float(value)
    raise TypeError(f"Object of type {type(value).__name__} is not JSON serializable")


def api_response(status_code: int, body: Any) -> dict:
    """
    Helper to format API Gateway response with CORS headers.

    Args:
        status_code: HTTP status code
        body: Response body (will be JSON serialized)

    Returns:
        dict: API Gateway response with headers
    """
    return {
        "statusCode": status_code,
        "body": json.dumps(body, default=convert_decimal),
        "headers": {"Content-Type": "application/json", **CORS_HEADERS},
    }


def text_response(status_code: int, body: str) -> dict:
    """
    Helper to format a plain text API Gateway response.

    No Content-Type is set; existing clients of the delete endpoint rely on it.
    """
    return {
        "statusCode": status_code,
        "body": body,
        "headers": dict(CORS_HEADERS),
    }


def error_response(error: BookApiError) -> dict:
    """
    Convert a known API error to its API Gateway response.

    Args:
        error: A classified error raised by a book operation

    Returns:
        dict: API Gateway error response
    """
    return api_response(error.status_code, error.to_body())


def server_error_response() -> dict:
    """Response for failures that are not one of the known API errors."""
    return api_response(500, {"error": "internal server error"})
