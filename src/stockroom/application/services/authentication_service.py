"""Authentication service for login and token verification."""

from __future__ import annotations

import asyncio
import logging
from dataclasses import dataclass
from typing import TYPE_CHECKING

from stockroom_auth import InvalidCredentialsError

if TYPE_CHECKING:
    from stockroom.application.services.user_directory_service import (
        UserDirectoryService,
    )
    from stockroom_auth import JWTService, PasswordHashingService, TokenPayload

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class AccessToken:
    access_token: str


class AuthenticationService:
    """
    Application service for user authentication.

    Bridges the stockroom_auth infrastructure (password hashing, JWT tokens)
    with the user directory. An unknown email and a wrong password raise the
    same InvalidCredentialsError so callers cannot probe which accounts exist.
    """

    def __init__(
        self,
        user_directory: UserDirectoryService,
        password_service: PasswordHashingService,
        jwt_service: JWTService,
    ):
        self._user_directory = user_directory
        self._password_service = password_service
        self._jwt_service = jwt_service

    async def login(self, email: str, password: str) -> AccessToken:
        user = await self._user_directory.find_by_email(email)
        if user is None:
            logger.warning("Login failed: unknown email %s", email)
            raise InvalidCredentialsError

        verified = await asyncio.to_thread(
            self._password_service.verify, password, user.password_hash
        )
        if not verified:
            logger.warning("Login failed: wrong password for %s", email)
            raise InvalidCredentialsError

        access_token = self._jwt_service.create_access_token(email)

        logger.info("User logged in: %s", email)
        return AccessToken(access_token=access_token)

    def verify_token(self, token: str) -> TokenPayload:
        return self._jwt_service.verify_token(token)
