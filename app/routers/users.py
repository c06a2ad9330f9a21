"""
Users Router

Registration and login for the accounts that may modify the catalog:
- POST /users/register: create an account, returns a bearer token
- POST /users/login: exchange email and password for a bearer token
- GET  /users/profile: the account behind the current token

Security:
=========
- Passwords are hashed with bcrypt before storage
- Plain text passwords are never logged or stored
- Unknown email and wrong password produce the same 401 message
"""

import logging

from fastapi import APIRouter, status
from sqlalchemy import select

from app.dependencies import AuthorizedUser, DbSession, RequestRecord
from app.exceptions import ConflictError, UnauthorizedError, ValidationFailedError
from app.models import User
from app.schemas import (
    AuthenticatedUserResponse,
    Envelope,
    UserResponse,
    success_envelope,
)
from app.services.security import create_access_token, hash_password, verify_password
from app.services.validation import validate_login, validate_registration

logger = logging.getLogger(__name__)

router = APIRouter(
    prefix="/users",
    tags=["Users"],
    responses={
        400: {"model": Envelope, "description": "Validation failed"},
        401: {"model": Envelope, "description": "Unauthorized"},
    },
)


def _authenticated(user: User) -> AuthenticatedUserResponse:
    return AuthenticatedUserResponse(
        id=user.id,
        name=user.name,
        email=user.email,
        token=create_access_token(user.id),
    )


@router.post(
    "/register",
    response_model=Envelope[AuthenticatedUserResponse],
    response_model_exclude_none=True,
    status_code=status.HTTP_201_CREATED,
    summary="Register a new user",
    description="""
    Create a new account.

    **Requirements:**
    - name: required
    - email: required, valid email address
    - password: at least 6 characters
    """,
)
def register(record: RequestRecord, db: DbSession) -> Envelope:
    """
    Register a new user.

    1. Validates name, email and password
    2. Rejects an email that is already registered
    3. Hashes the password and stores the user
    4. Returns the user with a bearer token
    """
    errors = validate_registration(record)
    if errors:
        raise ValidationFailedError(errors)

    email = record["email"].strip().lower()
    existing = db.execute(select(User).where(User.email == email)).scalar_one_or_none()
    if existing is not None:
        raise ConflictError()

    user = User(
        name=record["name"].strip(),
        email=email,
        hashed_password=hash_password(record["password"]),
    )
    db.add(user)
    db.commit()
    db.refresh(user)

    logger.info(f"New user registered: {user.email}")

    return success_envelope(
        data=_authenticated(user),
        message="User registered successfully",
    )


@router.post(
    "/login",
    response_model=Envelope[AuthenticatedUserResponse],
    response_model_exclude_none=True,
    summary="Login with email and password",
    description="""
    Authenticate to receive a bearer token.

    **Usage:**
    Include the token in the Authorization header:
    ```
    Authorization: Bearer <token>
    ```
    """,
)
def login(record: RequestRecord, db: DbSession) -> Envelope:
    errors = validate_login(record)
    if errors:
        raise ValidationFailedError(errors)

    email = record["email"].strip().lower()
    user = db.execute(select(User).where(User.email == email)).scalar_one_or_none()

    if user is None or not verify_password(record["password"], user.hashed_password):
        logger.warning(f"Login failed for {email}")
        raise UnauthorizedError("Invalid email or password")

    logger.info(f"User logged in: {user.email}")

    return success_envelope(data=_authenticated(user), message="Login successful")


@router.get(
    "/profile",
    response_model=Envelope[UserResponse],
    response_model_exclude_none=True,
    summary="Get current user",
    description="Profile of the user the bearer token was issued to.",
)
def profile(current_user: AuthorizedUser) -> Envelope:
    return success_envelope(data=UserResponse.model_validate(current_user))
