"""
Tests for the Application Shell

- Welcome route
- Unmatched routes
- Request body parsing
- Error detail visibility per environment
- Unhandled, database and parameter-validation errors
"""

import pytest
from fastapi import status
from fastapi.testclient import TestClient
from sqlalchemy.exc import SQLAlchemyError

from app import main
from app.main import app
from app.services.book_store import StoreError
from app.utils.identifiers import generate_object_id

BOOKS_URL = "/api/books"


def test_root(client):
    response = client.get("/")

    assert response.status_code == status.HTTP_200_OK
    data = response.json()
    assert data["success"] is True
    assert data["message"] == "Welcome to Book Catalog API"
    assert data["endpoints"]["books"]["create"] == "POST /api/books (Protected)"


class TestRouteNotFound:
    def test_unknown_route(self, client):
        response = client.get("/api/unknown")

        assert response.status_code == status.HTTP_404_NOT_FOUND
        assert response.json() == {"success": False, "message": "Route /api/unknown not found"}

    def test_unknown_route_keeps_query(self, client):
        response = client.get("/api/unknown?page=2")

        assert response.json()["message"] == "Route /api/unknown?page=2 not found"

    def test_unknown_method_on_known_path(self, client):
        response = client.patch(f"{BOOKS_URL}/{generate_object_id()}", json={"title": "x"})

        assert response.status_code == status.HTTP_405_METHOD_NOT_ALLOWED
        assert response.json()["success"] is False


class TestRequestBody:
    def test_malformed_json(self, client, auth_headers):
        response = client.post(
            BOOKS_URL,
            content=b'{"title": "Dune",',
            headers={**auth_headers, "Content-Type": "application/json"},
        )

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json() == {"success": False, "message": "Malformed JSON in request body"}

    def test_missing_body(self, client, auth_headers):
        response = client.post(BOOKS_URL, headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Request body cannot be empty"

    def test_non_object_body(self, client, auth_headers):
        response = client.post(BOOKS_URL, json=[1, 2], headers=auth_headers)

        assert response.status_code == status.HTTP_400_BAD_REQUEST
        assert response.json()["message"] == "Request body cannot be empty"


class TestErrorDetail:
    def test_store_failure_detail_in_development(self, client, fake_store):
        fake_store.errors["find_all"] = StoreError("connection refused")

        response = client.get(BOOKS_URL)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "success": False,
            "message": "Server error occurred while fetching books",
            "error": "connection refused",
        }

    def test_store_failure_detail_hidden_in_production(self, client, fake_store, monkeypatch):
        monkeypatch.setattr(main.settings, "environment", "production")
        fake_store.errors["find_all"] = StoreError("connection refused")

        response = client.get(BOOKS_URL)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert "error" not in response.json()


class TestUnhandledErrors:
    """Failures outside the APIError taxonomy still produce an envelope."""

    @pytest.fixture
    def lenient_client(self, client):
        # Keep the overrides installed by `client`; return 500s instead of raising
        with TestClient(app, raise_server_exceptions=False) as test_client:
            yield test_client

    def test_unexpected_error_in_development(self, lenient_client, fake_store):
        fake_store.errors["find_all"] = RuntimeError("kaboom")

        response = lenient_client.get(BOOKS_URL)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "success": False,
            "message": "Internal Server Error",
            "error": "kaboom",
        }

    def test_unexpected_error_in_production(self, lenient_client, fake_store, monkeypatch):
        monkeypatch.setattr(main.settings, "environment", "production")
        fake_store.errors["find_all"] = RuntimeError("kaboom")

        response = lenient_client.get(BOOKS_URL)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"success": False, "message": "Internal Server Error"}

    def test_database_error_in_development(self, lenient_client, fake_store):
        fake_store.errors["find_all"] = SQLAlchemyError("database is locked")

        response = lenient_client.get(BOOKS_URL)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {
            "success": False,
            "message": "Server error occurred",
            "error": "database is locked",
        }

    def test_database_error_in_production(self, lenient_client, fake_store, monkeypatch):
        monkeypatch.setattr(main.settings, "environment", "production")
        fake_store.errors["find_all"] = SQLAlchemyError("database is locked")

        response = lenient_client.get(BOOKS_URL)

        assert response.status_code == status.HTTP_500_INTERNAL_SERVER_ERROR
        assert response.json() == {"success": False, "message": "Server error occurred"}


def test_parameter_validation_error_is_enveloped():
    extra_app = main.create_app()

    @extra_app.get("/api/pages/{number}")
    def read_page(number: int) -> dict:
        return {"number": number}

    with TestClient(extra_app) as test_client:
        response = test_client.get("/api/pages/abc")

    assert response.status_code == status.HTTP_400_BAD_REQUEST
    data = response.json()
    assert data["success"] is False
    assert data["message"] == "Validation failed"
    assert len(data["errors"]) == 1
    assert data["errors"][0].startswith("path.number: ")
