"""User schemas for request/response models."""

from datetime import datetime
from uuid import UUID

from pydantic import BaseModel, ConfigDict, Field, field_validator

from stockroom_auth import MAX_SECRET_BYTES, secret_byte_length


class RegisterRequest(BaseModel):
    """Request schema for user registration.

    The email is kept exactly as submitted; the user directory performs the
    "@" check (400 ``INVALID_EMAIL``), the same one login applies.
    """

    name: str = Field(..., min_length=1, max_length=255)
    email: str = Field(..., description="User's email address, stored verbatim")
    password: str = Field(
        ...,
        min_length=1,
        description=f"Password, at most {MAX_SECRET_BYTES} bytes in UTF-8",
    )

    @field_validator("password")
    @classmethod
    def _password_fits_bcrypt(cls, value: str) -> str:
        if secret_byte_length(value) > MAX_SECRET_BYTES:
            raise ValueError(
                f"Password cannot be longer than {MAX_SECRET_BYTES} bytes",
            )
        return value

    model_config = ConfigDict(
        json_schema_extra={
            "example": {
                "name": "Ana",
                "email": "ana@mail.com",
                "password": "pw123",
            },
        },
    )


class UserResponse(BaseModel):
    """Response schema for user data. Never carries the password hash."""

    id: UUID
    name: str
    email: str
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)
