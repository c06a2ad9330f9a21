"""
Book Store

The persistence collaborator behind the resource controller.

BookStore is the interface the controller talks to; SQLAlchemyBookStore
implements it on top of a per-request Session. The store owns:
- identifier and timestamp assignment
- value normalization (trimming text, casting numeric strings)
- record constraints, enforced on every write

Failures are reported through a closed set of exceptions so callers can
switch on the outcome type:

    StoreError                   anything the store could not complete
    ├── InvalidIdentifierError   identifier does not have the store's shape
    └── RecordValidationError    write rejected by record constraints
"""

import logging
from abc import ABC, abstractmethod
from collections.abc import Mapping
from typing import Any

from sqlalchemy import select
from sqlalchemy.exc import SQLAlchemyError
from sqlalchemy.orm import Session

from app.models import Book
from app.services.validation import as_number
from app.utils.identifiers import is_valid_object_id

logger = logging.getLogger(__name__)


# =============================================================================
# Store Errors
# =============================================================================
class StoreError(Exception):
    """Base class for store failures."""


class InvalidIdentifierError(StoreError):
    """The identifier cannot name any record in the store."""

    def __init__(self, identifier: str) -> None:
        self.identifier = identifier
        super().__init__(f"Cast to identifier failed for value '{identifier}'")


class RecordValidationError(StoreError):
    """One or more record constraints were violated on write."""

    def __init__(self, messages: list[str]) -> None:
        self.messages = messages
        super().__init__(", ".join(messages))


# =============================================================================
# Record Constraints
# =============================================================================
# JSON field name -> ORM attribute
FIELD_ATTRIBUTES = {
    "title": "title",
    "author": "author",
    "genre": "genre",
    "price": "price",
    "inStock": "in_stock",
}

# field -> (max length, required message, too-long message)
TEXT_CONSTRAINTS = {
    "title": (200, "Please provide a book title", "Title cannot be more than 200 characters"),
    "author": (100, "Please provide an author name", "Author name cannot be more than 100 characters"),
    "genre": (50, "Please provide a genre", "Genre cannot be more than 50 characters"),
}


def normalize_book_fields(fields: Mapping[str, Any]) -> dict[str, Any]:
    """
    Keep known fields only, trim text and cast numeric strings.

    Values that cannot be cast are kept as-is so the constraint check
    can report them. A null inStock counts as absent, like the other
    optional fields.
    """
    normalized = {}
    for name in FIELD_ATTRIBUTES:
        if name not in fields:
            continue
        value = fields[name]
        if name == "inStock" and value is None:
            continue
        if name in TEXT_CONSTRAINTS and isinstance(value, str):
            value = value.strip()
        elif name == "price" and value is not None:
            number = as_number(value)
            value = number if number is not None else value
        normalized[name] = value
    return normalized


def book_constraint_violations(fields: Mapping[str, Any]) -> list[str]:
    """Check a complete, normalized book record against the store constraints."""
    messages = []

    for name, (max_length, required_message, length_message) in TEXT_CONSTRAINTS.items():
        value = fields.get(name)
        if not isinstance(value, str) or not value:
            messages.append(required_message)
        elif len(value) > max_length:
            messages.append(length_message)

    price = fields.get("price")
    if price is None:
        messages.append("Please provide a price")
    elif not isinstance(price, float):
        messages.append("Price must be a number")
    elif price < 0:
        messages.append("Price cannot be negative")

    if not isinstance(fields.get("inStock", True), bool):
        messages.append("inStock must be a boolean")

    return messages


# =============================================================================
# Store Interface
# =============================================================================
class BookStore(ABC):
    """
    Abstract interface for book persistence.

    Lookups by identifier raise InvalidIdentifierError when the identifier
    does not have the store's shape, and return None when no record has it.
    """

    @abstractmethod
    def find_all(self) -> list[Book]:
        """Return every book, newest first."""

    @abstractmethod
    def find_by_id(self, book_id: str) -> Book | None:
        """Return the book with this identifier, if any."""

    @abstractmethod
    def create(self, fields: Mapping[str, Any]) -> Book:
        """Persist a new book and return it with store-assigned fields."""

    @abstractmethod
    def update(self, book_id: str, fields: Mapping[str, Any]) -> Book | None:
        """Apply fields to an existing book and return the updated record."""

    @abstractmethod
    def delete(self, book_id: str) -> Book | None:
        """Remove a book and return it, or None if it did not exist."""


class SQLAlchemyBookStore(BookStore):
    """BookStore backed by a SQLAlchemy session."""

    def __init__(self, db: Session) -> None:
        self.db = db

    def find_all(self) -> list[Book]:
        stmt = select(Book).order_by(Book.created_at.desc(), Book.id.desc())
        try:
            return list(self.db.execute(stmt).scalars().all())
        except SQLAlchemyError as exc:
            raise self._store_error(exc) from exc

    def find_by_id(self, book_id: str) -> Book | None:
        self._check_identifier(book_id)
        try:
            return self.db.get(Book, book_id)
        except SQLAlchemyError as exc:
            raise self._store_error(exc) from exc

    def create(self, fields: Mapping[str, Any]) -> Book:
        record = normalize_book_fields(fields)
        record.setdefault("inStock", True)

        violations = book_constraint_violations(record)
        if violations:
            raise RecordValidationError(violations)

        book = Book(**{FIELD_ATTRIBUTES[name]: value for name, value in record.items()})
        try:
            self.db.add(book)
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError as exc:
            raise self._store_error(exc) from exc

        logger.info(f"Created book {book.id}: '{book.title}'")
        return book

    def update(self, book_id: str, fields: Mapping[str, Any]) -> Book | None:
        book = self.find_by_id(book_id)
        if book is None:
            return None

        changes = normalize_book_fields(fields)
        merged = {name: getattr(book, attr) for name, attr in FIELD_ATTRIBUTES.items()}
        merged.update(changes)

        violations = book_constraint_violations(merged)
        if violations:
            raise RecordValidationError(violations)

        for name, value in changes.items():
            setattr(book, FIELD_ATTRIBUTES[name], value)
        try:
            self.db.commit()
            self.db.refresh(book)
        except SQLAlchemyError as exc:
            raise self._store_error(exc) from exc

        logger.info(f"Updated book {book.id}")
        return book

    def delete(self, book_id: str) -> Book | None:
        book = self.find_by_id(book_id)
        if book is None:
            return None

        try:
            self.db.delete(book)
            self.db.commit()
        except SQLAlchemyError as exc:
            raise self._store_error(exc) from exc

        logger.info(f"Deleted book {book_id}")
        return book

    # -------------------------------------------------------------------------
    # Helpers
    # -------------------------------------------------------------------------
    @staticmethod
    def _check_identifier(book_id: str) -> None:
        if not is_valid_object_id(book_id):
            raise InvalidIdentifierError(book_id)

    def _store_error(self, exc: SQLAlchemyError) -> StoreError:
        """Roll back the failed unit of work and wrap the driver error."""
        self.db.rollback()
        return StoreError(str(exc))
