"""
Services Package

- validation.py: Field validators (registration, login, book)
- book_store.py: Store interface, SQLAlchemy implementation, store errors
- book_controller.py: Book operations and outcome mapping
- auth.py: Authorization gate for bearer credentials
- security.py: Password hashing and token signing
"""
