"""
Response Envelope

Every response body, success or failure, has the same shape:

    {
        "success": true,
        "message": "Book created successfully",   # optional
        "data": {...},                            # optional, success only
        "errors": ["Title is required"],          # optional, failure only
        "count": 3,                               # list responses
        "error": "connection refused"             # failure detail, non-production
    }

Absent keys are dropped when the envelope is serialized
(exclude_none), so clients never see null placeholders.
"""

from typing import Any, Generic, TypeVar

from pydantic import BaseModel, Field

DataT = TypeVar("DataT")


class Envelope(BaseModel, Generic[DataT]):
    """Uniform wrapper for every API outcome."""

    success: bool = Field(..., description="Whether the operation succeeded")
    message: str | None = Field(default=None, description="Human-readable outcome")
    data: DataT | None = Field(default=None, description="Operation payload")
    errors: list[str] | None = Field(
        default=None,
        description="Field-level violations, in the order they were found",
    )
    count: int | None = Field(default=None, ge=0, description="Number of items in data")
    error: str | None = Field(default=None, description="Underlying error detail")


def success_envelope(
    data: Any = None,
    message: str | None = None,
    count: int | None = None,
) -> Envelope:
    """Wrap a successful outcome."""
    return Envelope(success=True, message=message, data=data, count=count)


def failure_envelope(
    message: str,
    errors: list[str] | None = None,
    error: str | None = None,
) -> Envelope:
    """
    Wrap a failed outcome.

    Failure envelopes never carry data.
    """
    return Envelope(success=False, message=message, errors=errors or None, error=error)
