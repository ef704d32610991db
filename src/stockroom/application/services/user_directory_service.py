"""User directory: registration and lookup by email."""

from __future__ import annotations

import asyncio
import logging
from typing import TYPE_CHECKING

from stockroom.domain.user import (
    Email,
    EmailAlreadyExistsError,
    PasswordTooLongError,
    User,
)
from stockroom_auth import MAX_SECRET_BYTES, secret_byte_length

if TYPE_CHECKING:
    from stockroom.domain.user import UserRepository
    from stockroom_auth import PasswordHashingService

logger = logging.getLogger(__name__)


class UserDirectoryService:
    """
    Owns email uniqueness and user creation.

    Registration never hands the stored password hash back to the caller;
    ``find_by_email`` does, because the authentication service needs it.
    Emails are stored and matched exactly as given.
    """

    def __init__(
        self,
        user_repository: UserRepository,
        password_service: PasswordHashingService,
    ):
        self._user_repo = user_repository
        self._password_service = password_service

    async def register(self, name: str, email: str, password: str) -> User:
        existing_user = await self.find_by_email(email)
        if existing_user is not None:
            raise EmailAlreadyExistsError(email)

        if secret_byte_length(password) > MAX_SECRET_BYTES:
            raise PasswordTooLongError(MAX_SECRET_BYTES)

        # bcrypt is CPU-bound; keep it off the event loop
        password_hash = await asyncio.to_thread(self._password_service.hash, password)
        user = await self._user_repo.create(
            User.create(name=name, email=email, password_hash=password_hash),
        )

        logger.info("User registered: %s", email)
        return user.without_password()

    async def find_by_email(self, email: str) -> User | None:
        Email(email)
        return await self._user_repo.find_by_email(email)
