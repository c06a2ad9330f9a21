"""
Book Model

The sole catalog entity, stored one row per book.

The store owns the identifier and the timestamps:
- id: 24-character hex token assigned on insert
- created_at: set once on insert
- updated_at: refreshed on every modification

Column widths mirror the store-level length constraints
(title 200, author 100, genre 50) enforced in the book store.
"""

from datetime import UTC, datetime

from sqlalchemy import Boolean, DateTime, Float, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.utils.identifiers import OBJECT_ID_LENGTH, generate_object_id


def utc_now() -> datetime:
    """Timestamp factory for store-managed columns."""
    return datetime.now(UTC)


class Book(Base):
    """
    Book model representing catalog entries.

    Table: books

    Fields:
    - title: Book title (required, max 200)
    - author: Author name (required, max 100)
    - genre: Genre label (required, max 50)
    - price: Non-negative price
    - in_stock: Availability flag, true unless stated otherwise

    Example:
        book = Book(title="Dune", author="Frank Herbert", genre="SciFi", price=15)
    """

    __tablename__ = "books"

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=generate_object_id,
    )

    title: Mapped[str] = mapped_column(
        String(200),
        nullable=False,
        comment="Book title"
    )

    author: Mapped[str] = mapped_column(
        String(100),
        nullable=False,
        comment="Author name"
    )

    genre: Mapped[str] = mapped_column(
        String(50),
        nullable=False,
        comment="Genre label"
    )

    price: Mapped[float] = mapped_column(
        Float,
        nullable=False,
        comment="Book price"
    )

    in_stock: Mapped[bool] = mapped_column(
        Boolean,
        default=True,
        nullable=False,
        comment="Whether the book is currently in stock"
    )

    # -------------------------------------------------------------------------
    # Timestamps
    # -------------------------------------------------------------------------
    # Python-side defaults keep sub-second precision so newest-first
    # ordering is stable on every backend.
    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        index=True,
        nullable=False,
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
    )

    def __repr__(self) -> str:
        return f"Book(id='{self.id}', title='{self.title}', author='{self.author}')"
