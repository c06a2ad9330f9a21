"""
Book Pydantic Schemas

Book requests arrive as free-form JSON objects and are checked by the
field validators in app.services.validation, so only the response shape
is declared here. Field names are camelCase on the wire (inStock,
createdAt, updatedAt) and snake_case in Python.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class BookResponse(BaseModel):
    """
    Schema for book responses.

    Built from the ORM object (from_attributes) and serialized by alias.
    """

    id: str = Field(..., description="Store-assigned identifier (24 hex characters)")
    title: str = Field(..., description="Book title")
    author: str = Field(..., description="Author name")
    genre: str = Field(..., description="Genre label")
    price: float = Field(..., ge=0, description="Book price")
    in_stock: bool = Field(..., description="Whether the book is in stock")
    created_at: datetime = Field(..., description="When the book was created")
    updated_at: datetime = Field(..., description="When the book was last updated")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
        json_schema_extra={
            "example": {
                "id": "65a4f1c2e4b0a1b2c3d4e5f6",
                "title": "Dune",
                "author": "Frank Herbert",
                "genre": "SciFi",
                "price": 15.0,
                "inStock": True,
                "createdAt": "2024-01-15T10:30:00Z",
                "updatedAt": "2024-01-15T10:30:00Z",
            }
        },
    )
