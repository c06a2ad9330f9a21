"""
User Model

Represents an account on the registration/login surface. Only the bcrypt
hash of the password is ever stored.
"""

from datetime import datetime

from sqlalchemy import DateTime, String
from sqlalchemy.orm import Mapped, mapped_column

from app.database import Base
from app.models.book import utc_now
from app.utils.identifiers import OBJECT_ID_LENGTH, generate_object_id


class User(Base):
    """
    User model representing registered users.

    Table: users

    Indexes:
    - Primary key on id
    - email: Unique index for login lookups

    Example:
        user = User(
            name="John Doe",
            email="john@example.com",
            hashed_password=hash_password("secret123"),
        )
    """

    __tablename__ = "users"

    id: Mapped[str] = mapped_column(
        String(OBJECT_ID_LENGTH),
        primary_key=True,
        default=generate_object_id,
    )

    name: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="User's display name"
    )

    # Stored lowercase so lookups are case-insensitive
    email: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        index=True,
        nullable=False,
        comment="User's email address (used for login)"
    )

    hashed_password: Mapped[str] = mapped_column(
        String(255),
        nullable=False,
        comment="Bcrypt hashed password"
    )

    created_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        nullable=False,
        comment="When the user registered"
    )

    updated_at: Mapped[datetime] = mapped_column(
        DateTime(timezone=True),
        default=utc_now,
        onupdate=utc_now,
        nullable=False,
        comment="When the user was last updated"
    )

    def __repr__(self) -> str:
        """Developer-friendly string representation."""
        return f"User(id='{self.id}', email='{self.email}')"
