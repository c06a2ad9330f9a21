"""
SQLAlchemy Models Package

Models are SQLAlchemy ORM classes that map to database tables:
- Book: catalog entries
- User: accounts for the registration/login surface

Import all models here so Alembic discovers them for migrations.
"""

from app.models.book import Book
from app.models.user import User

__all__ = [
    "Book",
    "User",
]
