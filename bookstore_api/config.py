"""
Configuration and AWS client initialization for Bookstore API Lambda handlers

This module provides:
- DynamoDB resource and Books table handle
- Environment variable configuration
- Logger setup shared by handlers
"""

from __future__ import annotations

import logging
import os
from typing import TYPE_CHECKING

import boto3

if TYPE_CHECKING:
    from mypy_boto3_dynamodb.service_resource import DynamoDBServiceResource, Table

# Environment configuration
AWS_REGION = os.environ.get("AWS_REGION", "ap-south-1")
BOOKS_TABLE_NAME = os.environ.get("BOOKS_TABLE", "BooksTable")
LOG_LEVEL = os.environ.get("LOG_LEVEL", "INFO").upper()

# Created once per Lambda container and reused across invocations
# Tests patch books_table with a mock
dynamodb: "DynamoDBServiceResource" = boto3.resource("dynamodb", region_name=AWS_REGION)
books_table: "Table" = dynamodb.Table(BOOKS_TABLE_NAME)


def get_logger() -> logging.Logger:
    """
    Return the root logger at the configured level.

    Lambda installs its own handler on the root logger.
    """
    logger = logging.getLogger()
    logger.setLevel(getattr(logging, LOG_LEVEL, logging.INFO))
    return logger
