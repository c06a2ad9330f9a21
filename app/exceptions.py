"""
API Exceptions

Every anticipated failure of the request pipeline has its own exception
class. Each one carries the HTTP status and the message that ends up in
the failure envelope; the APIError handler registered in main.py renders
them. Anything that is not an APIError is unanticipated and goes to the
generic handler instead.

    APIError
    ├── EmptyBodyError            400
    ├── MalformedBodyError        400
    ├── MissingRequiredFieldsError 400
    ├── ValidationFailedError     400  (with an errors list)
    ├── MalformedIdentifierError  400
    ├── ConflictError             400
    ├── UnauthorizedError         401
    ├── NotFoundError             404
    ├── RouteNotFoundError        404
    └── StoreFailureError         500
"""

from fastapi import status


class APIError(Exception):
    """Base class for failures rendered as a failure envelope."""

    status_code: int = status.HTTP_400_BAD_REQUEST
    default_message: str = "Bad request"

    def __init__(
        self,
        message: str | None = None,
        errors: list[str] | None = None,
        detail: str | None = None,
        headers: dict[str, str] | None = None,
    ) -> None:
        self.message = message or self.default_message
        self.errors = errors
        # Underlying error text; only exposed outside production
        self.detail = detail
        self.headers = headers
        super().__init__(self.message)


class EmptyBodyError(APIError):
    default_message = "Request body cannot be empty"


class MalformedBodyError(APIError):
    default_message = "Malformed JSON in request body"


class MissingRequiredFieldsError(APIError):
    default_message = "Please provide all required fields (title, author, genre, price)"


class ValidationFailedError(APIError):
    """Raised with one message per field violation."""

    default_message = "Validation failed"

    def __init__(self, errors: list[str], message: str | None = None) -> None:
        super().__init__(message=message, errors=list(errors))


class MalformedIdentifierError(APIError):
    default_message = "Invalid ID format"


class ConflictError(APIError):
    default_message = "User already exists"


class UnauthorizedError(APIError):
    status_code = status.HTTP_401_UNAUTHORIZED
    default_message = "Not authorized"

    def __init__(self, message: str | None = None) -> None:
        super().__init__(message=message, headers={"WWW-Authenticate": "Bearer"})


class NotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND
    default_message = "Book not found"


class RouteNotFoundError(APIError):
    status_code = status.HTTP_404_NOT_FOUND

    def __init__(self, path: str) -> None:
        super().__init__(message=f"Route {path} not found")


class StoreFailureError(APIError):
    """The store could not complete an operation."""

    status_code = status.HTTP_500_INTERNAL_SERVER_ERROR
    default_message = "Server error occurred"
