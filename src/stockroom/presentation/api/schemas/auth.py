"""Authentication schemas for request/response models."""

from pydantic import BaseModel, ConfigDict, Field


class LoginRequest(BaseModel):
    """Request schema for user login.

    The email is a plain string on purpose: the user directory performs the
    "@" check and answers 400 when it fails.
    """

    email: str
    password: str

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "email": "user@example.com",
                "password": "securepassword123",
            },
        },
    )


class TokenResponse(BaseModel):
    """Response schema for an issued access token."""

    access_token: str
    token_type: str = Field(default="bearer")
    expires_in: int = Field(..., description="Token lifetime in seconds")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "access_token": "eyJhbGciOiJIUzI1NiIsInR5cCI6IkpXVCJ9...",
                "token_type": "bearer",
                "expires_in": 86400,
            },
        },
    )
