"""
Pytest configuration for E2E tests against a deployed Bookstore API.
"""

import os

import pytest
import requests


@pytest.fixture(scope="session")
def api_url():
    """API URL for the deployed backend, e.g. the HttpApi endpoint from sam deploy."""
    url = os.getenv("API_URL")

    if not url:
        pytest.skip("API URL not provided. Set the API_URL environment variable.")

    return url.rstrip("/")


@pytest.fixture(scope="session")
def http():
    """Shared HTTP session for API calls."""
    with requests.Session() as session:
        yield session


@pytest.fixture
def book_payload():
    return {
        "author": "E2E Author",
        "title": "E2E Title",
        "description": "Created by the end-to-end test suite",
        "publication_date": "2020-01-01",
        "available": True,
    }


@pytest.fixture
def created_book(api_url, http, book_payload):
    """Create a book for the test and delete it afterwards if it still exists.

    Yields the created book as returned by the API.
    """
    resp = http.post(f"{api_url}/book", json=book_payload, timeout=10)
    assert resp.status_code == 201, resp.text
    book = resp.json()

    yield book

    http.delete(f"{api_url}/book/{book['ISBN']}", timeout=10)
