"""
Tests for Books API Endpoints

This module tests all CRUD operations for the /api/v1/books endpoints.

TEST NAMING CONVENTION:
- test_<action>_<scenario>
- Examples: test_create_book_success, test_get_book_not_found
"""

import pytest
from fastapi import status

from bookstore.config import Settings, get_settings
from bookstore.main import app


@pytest.fixture
def book_payload(sample_author) -> dict:
    """A complete, valid create payload for sample_author."""
    return {
        "title": "Children of Dune",
        "isbn": "9780593098240",
        "year": 1976,
        "summary": "Paul's twins inherit the empire.",
        "image": "covers/children-of-dune.jpg",
        "price": "10.50",
        "authorId": sample_author.id,
    }


class TestListBooks:
    """Tests for GET /api/v1/books/ endpoint."""

    def test_list_books_empty(self, client):
        """Test listing books when database is empty."""
        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == []

    def test_list_books_with_data(self, client, sample_book):
        """Test listing books returns expected data."""
        response = client.get("/api/v1/books/")

        assert response.status_code == status.HTTP_200_OK
        data = response.json()
        assert len(data) == 1
        assert data[0]["title"] == "Dune"
        assert data[0]["authorId"] == sample_book.author_id


class TestGetBook:
    """Tests for GET /api/v1/books/{book_id} endpoint."""

    def test_get_book_success(self, client, sample_book):
        """Test getting a book by ID returns every field."""
        response = client.get(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_200_OK
        assert response.json() == {
            "id": sample_book.id,
            "title": "Dune",
            "isbn": "9780441013593",
            "year": 1965,
            "summary": "A noble family takes control of the desert planet Arrakis.",
            "image": "covers/dune.jpg",
            "price": "9.99",
            "authorId": sample_book.author_id,
        }

    def test_get_book_not_found(self, client):
        """Test getting a non-existent book returns 404."""
        response = client.get("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert "not found" in response.json()["detail"].lower()


class TestCreateBook:
    """Tests for POST /api/v1/books/ endpoint."""

    def test_create_book_minimal(self, client, sample_author):
        """Test creating a book with only required fields."""
        response = client.post(
            "/api/v1/books/",
            json={"title": "Dune", "isbn": "123", "authorId": sample_author.id},
        )

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        assert data["id"] > 0
        assert data["title"] == "Dune"
        assert data["isbn"] == "123"
        assert data["year"] is None
        assert data["price"] is None

    def test_create_book_full(self, client, book_payload):
        """Every scalar field of the payload comes back unchanged."""
        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        book_id = data.pop("id")
        assert book_id > 0
        assert data == book_payload

    def test_create_book_missing_required_fields(self, client):
        """title, isbn and authorId are all reported when missing."""
        response = client.post("/api/v1/books/", json={"year": 1965})

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        fields = {e["field"] for e in response.json()["errors"]}
        assert fields == {"title", "isbn", "authorId"}

    def test_create_book_summary_too_long(self, client, book_payload):
        """Summaries longer than 500 characters are rejected."""
        book_payload["summary"] = "x" * 501

        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "summary"

    def test_create_book_summary_at_limit(self, client, book_payload):
        """Exactly 500 characters is allowed."""
        book_payload["summary"] = "x" * 500

        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_201_CREATED

    def test_create_book_unknown_author(self, client, book_payload):
        """A book must reference an existing author."""
        book_payload["authorId"] = 99999

        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "authorId"
        assert client.get("/api/v1/books/").json() == []

    def test_create_book_wrong_type(self, client, book_payload):
        """Type errors are bad requests, not 422."""
        book_payload["year"] = "nineteen sixty-five"

        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "year"

    def test_create_book_price_would_be_rounded(self, client, book_payload):
        """A price with three decimal places is rejected, not rounded."""
        book_payload["price"] = "9.999"

        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "price"
        assert client.get("/api/v1/books/").json() == []

    def test_create_book_year_out_of_range(self, client, book_payload):
        """A year the column cannot hold is a bad request, not a server error."""
        book_payload["year"] = 10**20

        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "year"

    def test_create_book_long_text_fields(self, client, book_payload):
        """Only the summary has a length limit."""
        book_payload["title"] = "T" * 1000
        book_payload["isbn"] = "9" * 100
        book_payload["image"] = "covers/" + "i" * 1000

        response = client.post("/api/v1/books/", json=book_payload)

        assert response.status_code == status.HTTP_201_CREATED
        data = response.json()
        data.pop("id")
        assert data == book_payload


class TestUpdateBook:
    """Tests for PUT /api/v1/books/{book_id} endpoint."""

    def test_update_book_success(self, client, sample_book, second_author):
        """Every mutable field is replaced, including the author."""
        response = client.put(
            f"/api/v1/books/{sample_book.id}",
            json={
                "id": sample_book.id,
                "title": "Dune (Deluxe Edition)",
                "isbn": "9780593099322",
                "year": 2019,
                "price": "25.00",
                "authorId": second_author.id,
            },
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT

        data = client.get(f"/api/v1/books/{sample_book.id}").json()
        assert data["title"] == "Dune (Deluxe Edition)"
        assert data["year"] == 2019
        assert data["price"] == "25.00"
        assert data["authorId"] == second_author.id
        assert data["summary"] is None
        assert data["image"] is None

    def test_update_book_without_isbn(self, client, sample_book):
        """The ISBN is optional on update."""
        response = client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"id": sample_book.id, "title": "Dune", "authorId": sample_book.author_id},
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_update_book_not_found(self, client, sample_author):
        """Updating a book that does not exist returns 404."""
        response = client.put(
            "/api/v1/books/5",
            json={"id": 5, "title": "X", "authorId": sample_author.id},
        )

        assert response.status_code == status.HTTP_404_NOT_FOUND

    def test_update_book_id_mismatch(self, client, sample_book):
        """Path and body ids must match; the book is left untouched."""
        response = client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"id": sample_book.id + 1, "title": "Changed", "authorId": sample_book.author_id},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert client.get(f"/api/v1/books/{sample_book.id}").json()["title"] == "Dune"

    def test_update_book_missing_body(self, client, sample_book):
        """An update without a body is a bad request."""
        response = client.put(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_update_book_blank_title(self, client, sample_book):
        """The title stays required on update."""
        response = client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"id": sample_book.id, "title": "", "authorId": sample_book.author_id},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "title"

    def test_update_book_unknown_author(self, client, sample_book):
        """Moving a book to a missing author is rejected."""
        response = client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"id": sample_book.id, "title": "Dune", "authorId": 99999},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "authorId"
        assert client.get(f"/api/v1/books/{sample_book.id}").json()["authorId"] == sample_book.author_id


class TestDeleteBook:
    """Tests for DELETE /api/v1/books/{book_id} endpoint."""

    def test_delete_book_success(self, client, sample_book):
        """Test deleting a book successfully."""
        response = client.delete(f"/api/v1/books/{sample_book.id}")

        assert response.status_code == status.HTTP_204_NO_CONTENT
        assert client.get(f"/api/v1/books/{sample_book.id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_twice(self, client, sample_book):
        """Deleting twice gives 204 then 404."""
        assert client.delete(f"/api/v1/books/{sample_book.id}").status_code == status.HTTP_204_NO_CONTENT
        assert client.delete(f"/api/v1/books/{sample_book.id}").status_code == status.HTTP_404_NOT_FOUND

    def test_delete_book_keeps_author(self, client, sample_book):
        """Deleting a book leaves its author in place."""
        client.delete(f"/api/v1/books/{sample_book.id}")

        response = client.get(f"/api/v1/authors/{sample_book.author_id}")
        assert response.status_code == status.HTTP_200_OK

    def test_delete_book_invalid_id(self, client):
        """Delete(0) is rejected before the lookup."""
        response = client.delete("/api/v1/books/0")

        assert response.status_code == status.HTTP_400_BAD_REQUEST

    def test_delete_book_not_found(self, client):
        response = client.delete("/api/v1/books/99999")

        assert response.status_code == status.HTTP_404_NOT_FOUND


class TestAuthorReferenceSetting:
    """enforce_author_reference=False skips the author lookup."""

    @pytest.fixture
    def lenient_client(self, client):
        app.dependency_overrides[get_settings] = lambda: Settings(enforce_author_reference=False)
        yield client
        app.dependency_overrides.pop(get_settings, None)

    def test_update_with_reference_check_disabled(self, lenient_client, sample_book, second_author):
        """Valid references still work when the check is off."""
        response = lenient_client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"id": sample_book.id, "title": "Dune", "authorId": second_author.id},
        )

        assert response.status_code == status.HTTP_204_NO_CONTENT

    def test_update_without_author_id(self, lenient_client, sample_book):
        """authorId is required even when the author lookup is skipped."""
        response = lenient_client.put(
            f"/api/v1/books/{sample_book.id}",
            json={"id": sample_book.id, "title": "Dune"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["errors"][0]["field"] == "authorId"
