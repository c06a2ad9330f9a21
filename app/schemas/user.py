"""
User Pydantic Schemas

Response shapes for the registration/login surface.

SECURITY: no schema here exposes the password or its hash.
"""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field
from pydantic.alias_generators import to_camel


class UserResponse(BaseModel):
    """Public profile of the authenticated user."""

    id: str = Field(..., description="Unique user identifier")
    name: str = Field(..., description="User's display name")
    email: str = Field(..., description="User's email address")
    created_at: datetime = Field(..., description="When the user registered")

    model_config = ConfigDict(
        from_attributes=True,
        alias_generator=to_camel,
        populate_by_name=True,
    )


class AuthenticatedUserResponse(BaseModel):
    """
    Returned by register and login.

    The token goes in the Authorization header of protected requests:
        Authorization: Bearer <token>
    """

    id: str = Field(..., description="Unique user identifier")
    name: str = Field(..., description="User's display name")
    email: str = Field(..., description="User's email address")
    token: str = Field(..., description="Bearer token for protected endpoints")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "id": "65a4f1c2e4b0a1b2c3d4e5f6",
                "name": "John Doe",
                "email": "john@example.com",
                "token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
            }
        },
    )
