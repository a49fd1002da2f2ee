"""
Request validation utilities for Bookstore API

Provides functions to extract data from API Gateway events and to check
book payloads against the book schema.
"""

from __future__ import annotations

import json
import logging
from typing import Any
from urllib.parse import unquote

from dateutil import parser as date_parser

from .errors import MalformedBodyError, NotFoundError, ValidationError

logger = logging.getLogger()

STRING_FIELDS = ("author", "title", "description")
BOOK_FIELDS = (*STRING_FIELDS, "publication_date", "available")


def get_path_param(event: dict, param: str = "id") -> str:
    """
    Extract and URL-decode a path parameter from API Gateway event.

    Args:
        event: API Gateway event
        param: Parameter name to extract

    Returns:
        str: The decoded value

    Raises:
        NotFoundError: If the parameter is missing or empty, since no book
            can be stored under it
    """
    path_params = event.get("pathParameters") or {}
    value = path_params.get(param)
    if not value:
        logger.warning(f"Missing {param} in path parameters")
        raise NotFoundError(value)
    return unquote(value)


def parse_json_body(event: dict) -> Any:
    """
    Parse JSON body from API Gateway event.

    A missing body is treated like an empty one and fails to parse.

    Raises:
        MalformedBodyError: If the body is not valid JSON
    """
    try:
        return json.loads(event.get("body") or "")
    except json.JSONDecodeError as e:
        logger.warning(f"Invalid JSON in request body: {e}")
        raise MalformedBodyError(str(e)) from e


def validate_string_field(body: dict, field: str) -> str | None:
    """
    Validate a required, non-empty string field.

    Returns:
        str: Error message if validation fails, None if valid
    """
    value = body.get(field)
    if value is None:
        return f"{field} is a required field"
    if not isinstance(value, str):
        return f"{field} must be a string"
    if not value.strip():
        return f"{field} cannot be empty"
    return None


def validate_date_field(body: dict, field: str) -> str | None:
    """
    Validate a required date field.

    Accepts ISO 8601 as well as common written forms such as "01/02/2020",
    "2020/01/01" and "January 1, 2020". The value is only checked, not
    reformatted.

    Returns:
        str: Error message if validation fails, None if valid
    """
    value = body.get(field)
    if value is None:
        return f"{field} is a required field"
    if not isinstance(value, str) or not value.strip():
        return f"{field} must be a valid date"
    try:
        date_parser.parse(value)
    except (ValueError, OverflowError):
        return f"{field} must be a valid date"
    return None


def validate_boolean_field(body: dict, field: str) -> str | None:
    """
    Validate a required boolean field.

    Returns:
        str: Error message if validation fails, None if valid
    """
    value = body.get(field)
    if value is None:
        return f"{field} is a required field"
    if not isinstance(value, bool):
        return f"{field} must be a boolean"
    return None


def validate_book(payload: Any) -> dict[str, Any]:
    """
    Check a parsed request body against the book schema.

    Every field is checked so the caller sees all violations at once.

    Args:
        payload: Parsed JSON request body

    Returns:
        dict: The schema fields of the payload, as submitted. Anything else
            in the payload (including an ISBN) is dropped.

    Raises:
        ValidationError: With one message per invalid field
    """
    if not isinstance(payload, dict):
        raise ValidationError(["request body must be a JSON object"])

    errors = [validate_string_field(payload, field) for field in STRING_FIELDS]
    errors.append(validate_date_field(payload, "publication_date"))
    errors.append(validate_boolean_field(payload, "available"))
    errors = [error for error in errors if error]

    if errors:
        logger.warning(f"Book validation failed: {errors}")
        raise ValidationError(errors)

    return {field: payload[field] for field in BOOK_FIELDS}
