"""
Shared fixtures for unit tests
"""

import copy
from unittest.mock import patch

import pytest

from bookstore_api import config


class FakeBooksTable:
    """In-memory stand-in for the Books table, keyed on ISBN.

    Scan returns one item per page so callers have to follow LastEvaluatedKey.
    """

    def __init__(self):
        self.items = {}

    def get_item(self, Key):
        item = self.items.get(Key["ISBN"])
        return {"Item": copy.deepcopy(item)} if item is not None else {}

    def put_item(self, Item):
        self.items[Item["ISBN"]] = copy.deepcopy(Item)
        return {}

    def delete_item(self, Key):
        self.items.pop(Key["ISBN"], None)
        return {}

    def scan(self, ExclusiveStartKey=None):
        keys = list(self.items)
        start = keys.index(ExclusiveStartKey["ISBN"]) + 1 if ExclusiveStartKey else 0
        page = keys[start:start + 1]
        response = {"Items": [copy.deepcopy(self.items[key]) for key in page]}
        if start + 1 < len(keys):
            response["LastEvaluatedKey"] = {"ISBN": page[0]}
        return response


@pytest.fixture
def fake_table():
    """Patch config.books_table with an empty in-memory table"""
    table = FakeBooksTable()
    with patch.object(config, "books_table", table):
        yield table
