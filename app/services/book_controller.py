"""
Book Resource Controller

Orchestrates the five book operations on top of an injected BookStore and
turns every outcome into an envelope (success) or an APIError (failure).

Stage order matters because it decides which error a client sees first:

    create: required fields -> field validation -> store write
    update: existence       -> store write (store constraints only)
    delete: existence       -> store removal

Store outcomes map the same way for every operation:

    InvalidIdentifierError -> NotFoundError
    RecordValidationError  -> ValidationFailedError (messages joined)
    StoreError             -> StoreFailureError (generic message + detail)
"""

import logging
from collections.abc import Mapping
from typing import Any

from app.exceptions import (
    MissingRequiredFieldsError,
    NotFoundError,
    StoreFailureError,
    ValidationFailedError,
)
from app.models import Book
from app.schemas import BookResponse, Envelope, success_envelope
from app.services.book_store import (
    BookStore,
    InvalidIdentifierError,
    RecordValidationError,
    StoreError,
)
from app.services.validation import validate_book

logger = logging.getLogger(__name__)

REQUIRED_BOOK_FIELDS = ("title", "author", "genre", "price")


def missing_required_fields(record: Mapping[str, Any]) -> list[str]:
    """Names of required fields that are absent or null."""
    return [name for name in REQUIRED_BOOK_FIELDS if record.get(name) is None]


class BookController:
    """
    Book operations over an injected store.

    The controller holds no state besides the store handle.
    """

    def __init__(self, store: BookStore) -> None:
        self.store = store

    # -------------------------------------------------------------------------
    # Reads
    # -------------------------------------------------------------------------
    def list_books(self) -> Envelope:
        """All books, newest first, with their count."""
        try:
            books = self.store.find_all()
        except StoreError as exc:
            raise self._store_failure("fetching books", exc) from exc

        data = [self._to_response(book) for book in books]
        return success_envelope(data=data, count=len(data))

    def get_book(self, book_id: str) -> Envelope:
        try:
            book = self.store.find_by_id(book_id)
        except InvalidIdentifierError as exc:
            raise NotFoundError() from exc
        except StoreError as exc:
            raise self._store_failure("fetching book", exc) from exc

        if book is None:
            raise NotFoundError()
        return success_envelope(data=self._to_response(book))

    # -------------------------------------------------------------------------
    # Writes
    # -------------------------------------------------------------------------
    def create_book(self, record: Mapping[str, Any]) -> Envelope:
        """
        Create a book.

        1. Required fields present (title, author, genre, price)
        2. Field content valid
        3. Store write, which enforces the record constraints again
        """
        if missing_required_fields(record):
            raise MissingRequiredFieldsError()

        errors = validate_book(record)
        if errors:
            raise ValidationFailedError(errors)

        try:
            book = self.store.create(record)
        except RecordValidationError as exc:
            raise ValidationFailedError(exc.messages, message=str(exc)) from exc
        except StoreError as exc:
            raise self._store_failure("creating book", exc) from exc

        return success_envelope(
            data=self._to_response(book),
            message="Book created successfully",
        )

    def update_book(self, book_id: str, record: Mapping[str, Any]) -> Envelope:
        """
        Update a book.

        Existence is checked before anything else, so a missing book is
        reported as 404 even when the payload is also invalid. The payload
        is validated by the store constraints at write time only.
        """
        try:
            if self.store.find_by_id(book_id) is None:
                raise NotFoundError()
            book = self.store.update(book_id, record)
        except InvalidIdentifierError as exc:
            raise NotFoundError() from exc
        except RecordValidationError as exc:
            raise ValidationFailedError(exc.messages, message=str(exc)) from exc
        except StoreError as exc:
            raise self._store_failure("updating book", exc) from exc

        # Removed between the existence check and the write
        if book is None:
            raise NotFoundError()

        return success_envelope(
            data=self._to_response(book),
            message="Book updated successfully",
        )

    def delete_book(self, book_id: str) -> Envelope:
        try:
            if self.store.find_by_id(book_id) is None:
                raise NotFoundError()
            self.store.delete(book_id)
        except InvalidIdentifierError as exc:
            raise NotFoundError() from exc
        except StoreError as exc:
            raise self._store_failure("deleting book", exc) from exc

        return success_envelope(data={}, message="Book deleted successfully")

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    @staticmethod
    def _to_response(book: Book) -> BookResponse:
        return BookResponse.model_validate(book)

    @staticmethod
    def _store_failure(action: str, exc: StoreError) -> StoreFailureError:
        logger.error(f"Store failure while {action}: {exc}")
        return StoreFailureError(
            message=f"Server error occurred while {action}",
            detail=str(exc),
        )
