"""
E2E tests for the book API.

These tests verify against a deployed stack:
- Creating, reading, replacing and deleting a book
- Listing books
- Error responses for invalid input and unknown ISBNs
"""

import uuid

import pytest


@pytest.mark.e2e
class TestBookLifecycle:
    """Tests that walk a book through its lifecycle."""

    def test_create_returns_generated_isbn(self, created_book, book_payload):
        """Test that create echoes the payload plus a new ISBN."""
        isbn = created_book.pop("ISBN")

        assert isbn
        assert created_book == book_payload

    def test_get_returns_created_book(self, api_url, http, created_book):
        resp = http.get(f"{api_url}/book/{created_book['ISBN']}", timeout=10)

        assert resp.status_code == 200
        assert resp.headers["content-type"].startswith("application/json")
        assert resp.json() == created_book

    def test_update_replaces_book(self, api_url, http, created_book):
        """Test that update stores the new payload under the same ISBN."""
        new_fields = {
            "author": "Another Author",
            "title": "Another Title",
            "description": "Replaced",
            "publication_date": "2021-02-03",
            "available": False,
        }

        resp = http.put(f"{api_url}/book/{created_book['ISBN']}", json=new_fields, timeout=10)

        assert resp.status_code == 200
        assert resp.json() == {**new_fields, "ISBN": created_book["ISBN"]}

        resp = http.get(f"{api_url}/book/{created_book['ISBN']}", timeout=10)
        assert resp.json() == {**new_fields, "ISBN": created_book["ISBN"]}

    def test_delete_then_get_is_not_found(self, api_url, http, created_book):
        resp = http.delete(f"{api_url}/book/{created_book['ISBN']}", timeout=10)
        assert resp.status_code == 204

        resp = http.get(f"{api_url}/book/{created_book['ISBN']}", timeout=10)
        assert resp.status_code == 404
        assert resp.json() == {"error": "not found"}

    def test_list_includes_created_book(self, api_url, http, created_book):
        resp = http.get(f"{api_url}/books", timeout=30)

        assert resp.status_code == 200
        isbns = {book["ISBN"] for book in resp.json()}
        assert created_book["ISBN"] in isbns


@pytest.mark.e2e
class TestBookErrors:
    """Tests for error responses."""

    def test_create_missing_fields(self, api_url, http):
        resp = http.post(f"{api_url}/book", json={"title": "Only a title"}, timeout=10)

        assert resp.status_code == 400
        assert len(resp.json()["errors"]) == 4

    def test_create_malformed_body(self, api_url, http):
        resp = http.post(
            f"{api_url}/book",
            data='{"title": ',
            headers={"content-type": "application/json"},
            timeout=10,
        )

        assert resp.status_code == 400
        assert resp.json()["error"].startswith("invalid request body format : ")

    def test_update_unknown_isbn(self, api_url, http):
        resp = http.put(f"{api_url}/book/{uuid.uuid4()}", json={}, timeout=10)

        assert resp.status_code == 404
        assert resp.json() == {"error": "not found"}

    def test_delete_unknown_isbn(self, api_url, http):
        resp = http.delete(f"{api_url}/book/{uuid.uuid4()}", timeout=10)

        assert resp.status_code == 404
