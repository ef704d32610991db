"""User domain - user identity and stored credentials.

Design notes:
- User ID is a random UUID4 generated at creation
- Email is unique and only checked for an "@" (no normalization)
- Users are created once and never updated or deleted
- Repository interface defined here, implementation in infrastructure
"""

from stockroom.domain.user.aggregates import User
from stockroom.domain.user.exceptions import (
    EmailAlreadyExistsError,
    InvalidEmailError,
    PasswordTooLongError,
)
from stockroom.domain.user.repositories import UserRepository
from stockroom.domain.user.value_objects import Email

__all__ = [
    "Email",
    "EmailAlreadyExistsError",
    "InvalidEmailError",
    "PasswordTooLongError",
    "User",
    "UserRepository",
]
