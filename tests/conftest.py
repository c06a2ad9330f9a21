"""
pytest Fixtures for Book Catalog API Tests

This file contains shared fixtures used across all test files.

FIXTURE SCOPES:
- session scope for the engine (expensive to create)
- function scope for sessions and clients (isolation between tests)
"""

# =============================================================================
# TEST ENVIRONMENT SETUP
# =============================================================================
# IMPORTANT: Set environment variables BEFORE importing the app
import os

os.environ["SECRET_KEY"] = "test-secret-key-for-unit-tests-at-least-32-characters-long"
os.environ["ENVIRONMENT"] = "development"

from collections.abc import Generator
from datetime import UTC, datetime, timedelta

import pytest
from fastapi.testclient import TestClient
from sqlalchemy import create_engine
from sqlalchemy.orm import Session, sessionmaker
from sqlalchemy.pool import StaticPool

from app.database import Base, get_db
from app.dependencies import get_book_store
from app.main import app
from app.models import Book, User
from app.services.security import create_access_token, hash_password
from tests.fakes import FakeBookStore

# =============================================================================
# DATABASE FIXTURES
# =============================================================================
# SQLite in-memory keeps tests fast and isolated. StaticPool keeps the single
# connection alive, otherwise the in-memory database would disappear between
# connections.


@pytest.fixture(scope="session")
def engine():
    """Create a SQLite in-memory database engine with all tables."""
    engine = create_engine(
        "sqlite:///:memory:",
        connect_args={"check_same_thread": False},
        poolclass=StaticPool,
    )

    Base.metadata.create_all(bind=engine)

    yield engine

    Base.metadata.drop_all(bind=engine)


@pytest.fixture(scope="function")
def db_session(engine) -> Generator[Session, None, None]:
    """
    Create a fresh database session for each test.

    The session is wrapped in a transaction that's rolled back,
    ensuring test isolation without needing to recreate tables.
    """
    TestSessionLocal = sessionmaker(
        autocommit=False,
        autoflush=False,
        bind=engine,
    )

    connection = engine.connect()
    transaction = connection.begin()
    session = TestSessionLocal(bind=connection)

    yield session

    session.close()
    transaction.rollback()
    connection.close()


@pytest.fixture(scope="function")
def client(db_session: Session) -> Generator[TestClient, None, None]:
    """
    Create a test client bound to the test database.

    The get_db dependency is overridden to use the test session.
    """

    def override_get_db():
        try:
            yield db_session
        finally:
            pass  # Session cleanup handled by db_session fixture

    app.dependency_overrides[get_db] = override_get_db

    with TestClient(app) as test_client:
        yield test_client

    app.dependency_overrides.clear()


@pytest.fixture
def fake_store(client: TestClient) -> FakeBookStore:
    """
    Replace the book store with an in-memory fake that records its calls.

    The database override from `client` stays in place, so the
    authorization gate still looks users up in the test database.
    """
    store = FakeBookStore()
    app.dependency_overrides[get_book_store] = lambda: store
    return store


# =============================================================================
# SAMPLE DATA FIXTURES
# =============================================================================
@pytest.fixture
def sample_user(db_session: Session) -> User:
    """Create a registered user for testing."""
    user = User(
        name="Test User",
        email="testuser@example.com",
        hashed_password=hash_password("secret123"),
    )
    db_session.add(user)
    db_session.commit()
    db_session.refresh(user)
    return user


@pytest.fixture
def auth_headers(sample_user: User) -> dict[str, str]:
    """Authorization header carrying a valid bearer token."""
    token = create_access_token(sample_user.id)
    return {"Authorization": f"Bearer {token}"}


@pytest.fixture
def sample_book(db_session: Session) -> Book:
    """Create a sample book for testing."""
    book = Book(
        title="Dune",
        author="Frank Herbert",
        genre="SciFi",
        price=15.0,
    )
    db_session.add(book)
    db_session.commit()
    db_session.refresh(book)
    return book


@pytest.fixture
def multiple_books(db_session: Session) -> list[Book]:
    """Create books with distinct creation times, oldest first."""
    base = datetime(2024, 1, 1, tzinfo=UTC)
    books = []
    for i in range(3):
        book = Book(
            title=f"Test Book {i + 1}",
            author="Test Author",
            genre="Fiction",
            price=10.0 + i,
            created_at=base + timedelta(days=i),
            updated_at=base + timedelta(days=i),
        )
        books.append(book)
        db_session.add(book)

    db_session.commit()
    for book in books:
        db_session.refresh(book)

    return books
