"""
Pydantic Schemas Package

Response models for the API. Request bodies are plain JSON objects checked
by the field validators, so every failure can be reported in the uniform
envelope instead of a framework-specific error body.
"""

from app.schemas.book import BookResponse
from app.schemas.envelope import Envelope, failure_envelope, success_envelope
from app.schemas.user import AuthenticatedUserResponse, UserResponse

__all__ = [
    # Envelope
    "Envelope",
    "success_envelope",
    "failure_envelope",
    # Book schemas
    "BookResponse",
    # User schemas
    "UserResponse",
    "AuthenticatedUserResponse",
]
