"""
Book Catalog API Application Package

A catalog of book records with public reads, token-gated writes and a
user registration/login surface.

Package Structure:
- config.py: Application configuration using Pydantic Settings
- database.py: SQLAlchemy database connection and session management
- main.py: FastAPI application factory and exception handlers
- dependencies.py: Request pipeline (body, identifier, authorization, controller)
- exceptions.py: Failure taxonomy rendered as envelopes
- models/: SQLAlchemy ORM models
- schemas/: Response envelope and response schemas
- routers/: API route handlers
- services/: Validators, authorization gate, book store and controller
- utils/: Identifier helpers
"""

__version__ = "1.0.0"
