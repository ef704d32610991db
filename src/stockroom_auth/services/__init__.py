"""Authentication services.

Provides password hashing and JWT token management.
"""

from stockroom_auth.services.jwt_service import JWTService
from stockroom_auth.services.password_service import (
    MAX_SECRET_BYTES,
    PasswordHashingService,
    secret_byte_length,
)

__all__ = [
    "MAX_SECRET_BYTES",
    "PasswordHashingService",
    "secret_byte_length",
    "JWTService",
]
