#!/usr/bin/env python3
"""
Seed script to load books from a JSON file into the Books DynamoDB table
Run this after deploying the stack to give a fresh table some data

The file must hold a JSON array of book objects with the same fields the
API accepts (author, title, description, publication_date, available).
Every book gets a new ISBN; invalid entries are reported and skipped.

The script validates with the bookstore_api package, so install it first:
    pip install -e .

Environment Variables (optional):
    AWS_PROFILE: AWS profile name (default: 'default')
    AWS_REGION: AWS region (default: 'ap-south-1')
    BOOKS_TABLE: DynamoDB table name (default: 'BooksTable')

Example usage:
    # Use default profile and values
    python3 scripts/seed-books.py books.json

    # Override settings
    AWS_PROFILE=prod BOOKS_TABLE=BooksTable-prod python3 scripts/seed-books.py books.json
"""

import json
import os
import sys
import uuid

import boto3
from botocore.exceptions import ClientError

from bookstore_api.utils.errors import ValidationError
from bookstore_api.utils.validation import validate_book

# Configuration - Update these values or set environment variables
PROFILE = os.environ.get('AWS_PROFILE', 'default')
REGION = os.environ.get('AWS_REGION', 'ap-south-1')
TABLE_NAME = os.environ.get('BOOKS_TABLE', 'BooksTable')


def seed(books, table):
    """
    Validate each entry and write the valid ones under new ISBNs.

    Args:
        books: Parsed list of book payloads
        table: DynamoDB Table resource

    Returns:
        tuple: (seeded, invalid, failed) counts
    """
    seeded = 0
    invalid = 0
    failed = 0

    for index, payload in enumerate(books):
        try:
            fields = validate_book(payload)
        except ValidationError as e:
            print(f"⏭️  Skipping entry {index}: {', '.join(e.errors)}")
            invalid += 1
            continue

        item = {**fields, 'ISBN': str(uuid.uuid4())}

        try:
            table.put_item(Item=item)
            print(f"✅ Seeded: {item['ISBN']}")
            print(f"   📚 {item['author']} - {item['title']}")
            seeded += 1
        except ClientError as e:
            print(f"❌ Failed to seed entry {index}: {e}")
            failed += 1

    return seeded, invalid, failed


def main():
    if len(sys.argv) != 2:
        print(f"Usage: {sys.argv[0]} <books.json>")
        sys.exit(1)

    with open(sys.argv[1]) as f:
        books = json.load(f)

    if not isinstance(books, list):
        print("❌ Seed file must contain a JSON array of books")
        sys.exit(1)

    session = boto3.Session(profile_name=PROFILE, region_name=REGION)
    table = session.resource('dynamodb').Table(TABLE_NAME)

    print(f"📊 Target DynamoDB table: {TABLE_NAME}")
    print(f"🌍 Using AWS Profile: {PROFILE}")
    print(f"🌎 Using AWS Region: {REGION}")
    print()

    seeded, invalid, failed = seed(books, table)

    print()
    print("=" * 60)
    print("📊 Seed Summary:")
    print(f"   Entries in file: {len(books)}")
    print(f"   Books seeded: {seeded}")
    print(f"   Entries skipped (invalid): {invalid}")
    print(f"   Entries failed: {failed}")
    print("=" * 60)

    if failed:
        print()
        print("⚠️  Some books could not be written. Check errors above.")


if __name__ == '__main__':
    try:
        main()
    except KeyboardInterrupt:
        print("\n⚠️  Seeding interrupted by user")
    except Exception as e:
        print(f"\n❌ Seeding failed: {e}")
        raise
