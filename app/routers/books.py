"""
Books Router

CRUD endpoints for the catalog. Reads are public; writes need a bearer
token.

Each handler only declares its pipeline (see app.dependencies) and hands
the request to the BookController:

    POST   /books        body -> auth -> controller.create_book
    PUT    /books/{id}   body -> id -> auth -> controller.update_book
    DELETE /books/{id}   id -> auth -> controller.delete_book
    GET    /books/{id}   id -> controller.get_book
"""

from typing import Any

from fastapi import APIRouter, status

from app.dependencies import (
    AuthorizedUser,
    Controller,
    RequestRecord,
    ValidBookId,
)
from app.schemas import BookResponse, Envelope

router = APIRouter(
    prefix="/books",
    tags=["Books"],
    responses={
        400: {"model": Envelope, "description": "Malformed request or invalid book"},
        404: {"model": Envelope, "description": "Book not found"},
        500: {"model": Envelope, "description": "Store failure"},
    },
)


@router.get(
    "",
    response_model=Envelope[list[BookResponse]],
    response_model_exclude_none=True,
    summary="List all books",
    description="Get every book in the catalog, newest first.",
)
def list_books(controller: Controller) -> Envelope:
    return controller.list_books()


@router.get(
    "/{book_id}",
    response_model=Envelope[BookResponse],
    response_model_exclude_none=True,
    summary="Get a book by ID",
)
def get_book(book_id: ValidBookId, controller: Controller) -> Envelope:
    return controller.get_book(book_id)


@router.post(
    "",
    response_model=Envelope[BookResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Create a new book",
    description="Requires title, author, genre and price. Requires a bearer token.",
    responses={401: {"model": Envelope, "description": "Not authorized"}},
)
def create_book(
    record: RequestRecord,
    _: AuthorizedUser,
    controller: Controller,
) -> Envelope:
    """
    Create a new book.

    inStock defaults to true when it is not provided.
    """
    return controller.create_book(record)


@router.put(
    "/{book_id}",
    response_model=Envelope[BookResponse],
    response_model_exclude_none=True,
    summary="Update a book",
    description="Replace the provided fields of an existing book. Requires a bearer token.",
    responses={401: {"model": Envelope, "description": "Not authorized"}},
)
def update_book(
    record: RequestRecord,
    book_id: ValidBookId,
    _: AuthorizedUser,
    controller: Controller,
) -> Envelope:
    return controller.update_book(book_id, record)


@router.delete(
    "/{book_id}",
    response_model=Envelope[dict[str, Any]],
    response_model_exclude_none=True,
    summary="Delete a book",
    description="Permanently delete a book. Requires a bearer token.",
    responses={401: {"model": Envelope, "description": "Not authorized"}},
)
def delete_book(
    book_id: ValidBookId,
    _: AuthorizedUser,
    controller: Controller,
) -> Envelope:
    return controller.delete_book(book_id)
