"""
Tests for BookController

The controller is exercised directly over FakeBookStore, which makes it
easy to force every store outcome and to check how far each request got.
"""

import pytest

from app.exceptions import (
    MissingRequiredFieldsError,
    NotFoundError,
    StoreFailureError,
    ValidationFailedError,
)
from app.services.book_controller import BookController, missing_required_fields
from app.services.book_store import (
    InvalidIdentifierError,
    RecordValidationError,
    StoreError,
)
from app.utils.identifiers import generate_object_id
from tests.fakes import FakeBookStore, make_book

VALID_BOOK = {"title": "Dune", "author": "Herbert", "genre": "SciFi", "price": 15}


@pytest.fixture
def book():
    return make_book()


@pytest.fixture
def store(book):
    return FakeBookStore(books=[book])


@pytest.fixture
def controller(store):
    return BookController(store)


def test_missing_required_fields():
    assert missing_required_fields({"title": "Dune", "price": None}) == [
        "author",
        "genre",
        "price",
    ]
    assert missing_required_fields(VALID_BOOK) == []


class TestList:
    def test_list_returns_count(self, controller, book):
        envelope = controller.list_books()

        assert envelope.success is True
        assert envelope.count == 1
        assert envelope.data[0].id == book.id

    def test_list_store_failure(self):
        controller = BookController(
            FakeBookStore(errors={"find_all": StoreError("connection refused")})
        )

        with pytest.raises(StoreFailureError) as exc_info:
            controller.list_books()

        assert exc_info.value.message == "Server error occurred while fetching books"
        assert exc_info.value.detail == "connection refused"
        assert exc_info.value.status_code == 500


class TestGet:
    def test_get_found(self, controller, book):
        envelope = controller.get_book(book.id)

        assert envelope.data.title == "Dune"
        assert envelope.message is None

    def test_get_absent(self, controller):
        with pytest.raises(NotFoundError):
            controller.get_book(generate_object_id())

    def test_get_store_identifier_error_is_not_found(self, controller):
        """A malformed identifier surfaced by the store is a 404, not a format error."""
        with pytest.raises(NotFoundError):
            controller.get_book("bad-id")

    def test_get_store_failure(self):
        controller = BookController(
            FakeBookStore(errors={"find_by_id": StoreError("timeout")})
        )

        with pytest.raises(StoreFailureError) as exc_info:
            controller.get_book(generate_object_id())

        assert exc_info.value.message == "Server error occurred while fetching book"


class TestCreate:
    def test_create_success(self, controller, store):
        envelope = controller.create_book(VALID_BOOK)

        assert envelope.message == "Book created successfully"
        assert envelope.data.in_stock is True
        assert envelope.data.id in store.books

    def test_required_fields_checked_before_content(self, controller, store):
        """Missing fields win over content violations and nothing is written."""
        with pytest.raises(MissingRequiredFieldsError):
            controller.create_book({"title": "", "author": "X", "genre": "Y"})

        assert "create" not in store.calls

    def test_content_violations(self, controller, store):
        with pytest.raises(ValidationFailedError) as exc_info:
            controller.create_book({**VALID_BOOK, "title": "", "price": -3})

        assert exc_info.value.errors == [
            "Title is required",
            "Price must be a positive number",
        ]
        assert "create" not in store.calls

    def test_store_constraint_violation(self):
        store = FakeBookStore(
            errors={"create": RecordValidationError(["Title cannot be more than 200 characters"])}
        )

        with pytest.raises(ValidationFailedError) as exc_info:
            BookController(store).create_book(VALID_BOOK)

        assert exc_info.value.message == "Title cannot be more than 200 characters"
        assert exc_info.value.status_code == 400

    def test_store_failure(self):
        store = FakeBookStore(errors={"create": StoreError("disk full")})

        with pytest.raises(StoreFailureError) as exc_info:
            BookController(store).create_book(VALID_BOOK)

        assert exc_info.value.message == "Server error occurred while creating book"
        assert exc_info.value.detail == "disk full"


class TestUpdate:
    def test_update_success(self, controller, book):
        envelope = controller.update_book(book.id, {"genre": "Classic"})

        assert envelope.message == "Book updated successfully"
        assert envelope.data.genre == "Classic"
        assert envelope.data.title == "Dune"

    def test_update_existence_checked_first(self, controller, store):
        with pytest.raises(NotFoundError):
            controller.update_book(generate_object_id(), {"title": "", "price": -1})

        assert store.calls == ["find_by_id"]

    def test_update_skips_create_field_validator(self, controller, book):
        """Update relies on store constraints only, so their messages are reported."""
        with pytest.raises(ValidationFailedError) as exc_info:
            controller.update_book(book.id, {"author": ""})

        assert exc_info.value.errors == ["Please provide an author name"]
        assert exc_info.value.message == "Please provide an author name"

    def test_update_invalid_identifier_is_not_found(self, controller):
        with pytest.raises(NotFoundError):
            controller.update_book("bad-id", VALID_BOOK)

    def test_update_removed_during_write(self, book):
        store = FakeBookStore(books=[book])
        store.update = lambda book_id, fields: None

        with pytest.raises(NotFoundError):
            BookController(store).update_book(book.id, VALID_BOOK)

    def test_update_store_failure(self, book):
        store = FakeBookStore(books=[book], errors={"update": StoreError("lost connection")})

        with pytest.raises(StoreFailureError) as exc_info:
            BookController(store).update_book(book.id, VALID_BOOK)

        assert exc_info.value.message == "Server error occurred while updating book"


class TestDelete:
    def test_delete_success(self, controller, store, book):
        envelope = controller.delete_book(book.id)

        assert envelope.data == {}
        assert envelope.message == "Book deleted successfully"
        assert book.id not in store.books

    def test_delete_absent(self, controller, store):
        with pytest.raises(NotFoundError):
            controller.delete_book(generate_object_id())

        assert "delete" not in store.calls

    def test_delete_invalid_identifier_is_not_found(self):
        store = FakeBookStore(errors={"find_by_id": InvalidIdentifierError("bad-id")})

        with pytest.raises(NotFoundError):
            BookController(store).delete_book(generate_object_id())

    def test_delete_store_failure(self, book):
        store = FakeBookStore(books=[book], errors={"delete": StoreError("locked")})

        with pytest.raises(StoreFailureError) as exc_info:
            BookController(store).delete_book(book.id)

        assert exc_info.value.message == "Server error occurred while deleting book"
