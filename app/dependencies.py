"""
FastAPI Dependencies Module

Dependencies are reusable components injected into route handlers.
FastAPI resolves a route's dependencies in the order its parameters are
declared and stops at the first one that raises, so the parameter order of
a route IS its validation pipeline:

    RequestRecord  -> body present and a non-empty JSON object
    ValidBookId    -> path identifier has the store's shape
    AuthorizedUser -> bearer credential admitted by the authorization gate
    Controller     -> BookController bound to the request's store

Tests replace get_db or get_book_store through app.dependency_overrides.
"""

import json
from typing import Annotated, Any

from fastapi import Depends, Request
from fastapi.security import HTTPAuthorizationCredentials, HTTPBearer
from sqlalchemy.orm import Session

from app.database import get_db
from app.exceptions import (
    EmptyBodyError,
    MalformedBodyError,
    MalformedIdentifierError,
    UnauthorizedError,
)
from app.models import User
from app.services.auth import authorize
from app.services.book_controller import BookController
from app.services.book_store import BookStore, SQLAlchemyBookStore
from app.utils.identifiers import is_valid_object_id

DbSession = Annotated[Session, Depends(get_db)]


# =============================================================================
# Request Body
# =============================================================================
async def get_request_record(request: Request) -> dict[str, Any]:
    """
    Read the JSON body of a write request.

    Raises:
        EmptyBodyError: body missing, not an object, or an empty object
        MalformedBodyError: body is not valid JSON
    """
    body = await request.body()
    if not body.strip():
        raise EmptyBodyError()

    try:
        record = json.loads(body)
    except ValueError as exc:
        raise MalformedBodyError() from exc

    if not isinstance(record, dict) or not record:
        raise EmptyBodyError()

    return record


RequestRecord = Annotated[dict[str, Any], Depends(get_request_record)]


# =============================================================================
# Path Identifier
# =============================================================================
def get_valid_book_id(book_id: str) -> str:
    """
    Check the shape of a path identifier before any store lookup.

    Raises:
        MalformedIdentifierError: identifier is not 24 hex characters
    """
    if not is_valid_object_id(book_id):
        raise MalformedIdentifierError()
    return book_id


ValidBookId = Annotated[str, Depends(get_valid_book_id)]


# =============================================================================
# Authorization Gate
# =============================================================================
# auto_error=False so a missing header reaches require_authorization and is
# reported in the failure envelope instead of FastAPI's default 403.
bearer_scheme = HTTPBearer(auto_error=False)


def require_authorization(
    db: DbSession,
    credentials: HTTPAuthorizationCredentials | None = Depends(bearer_scheme),
) -> User:
    """
    Admit the request or reject it with 401.

    Raises:
        UnauthorizedError: no bearer token, or the token was rejected
    """
    if credentials is None:
        raise UnauthorizedError("Not authorized, no token")

    user = authorize(db, credentials.credentials)
    if user is None:
        raise UnauthorizedError("Not authorized, token failed")

    return user


AuthorizedUser = Annotated[User, Depends(require_authorization)]


# =============================================================================
# Store and Controller
# =============================================================================
def get_book_store(db: DbSession) -> BookStore:
    """Store handle for the current request."""
    return SQLAlchemyBookStore(db)


def get_book_controller(
    store: BookStore = Depends(get_book_store),
) -> BookController:
    """Controller bound to the current request's store."""
    return BookController(store)


Controller = Annotated[BookController, Depends(get_book_controller)]
