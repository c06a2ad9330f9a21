"""
Test Suite for Book Catalog API

Test Organization:
- conftest.py: Shared fixtures (test database, client, fake store, sample data)
- fakes.py: In-memory BookStore that records its calls
- test_books.py: /api/books endpoints
- test_auth.py: Authorization gate and pipeline order
- test_users.py: /api/users endpoints
- test_book_controller.py: Controller outcome mapping
- test_book_store.py: SQLAlchemy store and record constraints
- test_validation.py: Field validators and identifier helpers
- test_app.py: Welcome route, unmatched routes, error envelopes

Running Tests:
    # Run all tests
    pytest

    # Run specific file
    pytest tests/test_books.py

    # Run with verbose output
    pytest -v
"""
