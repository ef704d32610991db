"""Stockroom Auth - Generic authentication infrastructure.

This package provides authentication infrastructure that is independent
of the product catalog domain. It handles:
- Password hashing (bcrypt)
- Access token creation and verification (JWT)

Architecture:
    stockroom_auth/
    ├── services/           # Pure logic (password hashing, JWT)
    ├── schemas.py          # Data classes
    └── exceptions.py       # Auth exceptions

Usage:
    from stockroom_auth import PasswordHashingService, JWTService
"""

from stockroom_auth.exceptions import (
    AuthError,
    InvalidCredentialsError,
    InvalidTokenError,
)
from stockroom_auth.schemas import TokenPayload
from stockroom_auth.services import (
    MAX_SECRET_BYTES,
    JWTService,
    PasswordHashingService,
    secret_byte_length,
)

__all__ = [
    # Services
    "PasswordHashingService",
    "JWTService",
    "MAX_SECRET_BYTES",
    "secret_byte_length",
    # Schemas
    "TokenPayload",
    # Exceptions
    "AuthError",
    "InvalidTokenError",
    "InvalidCredentialsError",
]
