"""Users router: registration and the current user's profile."""

import logging

from fastapi import APIRouter, status

from stockroom.presentation.api.dependencies import (
    CurrentSubject,
    DBSession,
    UserDirectory,
)
from stockroom.presentation.api.schemas.common import ErrorResponse
from stockroom.presentation.api.schemas.users import RegisterRequest, UserResponse
from stockroom_auth import InvalidTokenError

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Register user",
    responses={
        201: {"description": "User created"},
        409: {"model": ErrorResponse, "description": "Email already in use"},
    },
)
async def register_user(
    request: RegisterRequest,
    user_directory: UserDirectory,
    session: DBSession,
) -> UserResponse:
    """Create a new user account. The password hash is never returned."""
    user = await user_directory.register(
        name=request.name,
        email=request.email,
        password=request.password,
    )
    await session.commit()

    return UserResponse.model_validate(user)


@router.get(
    "/me",
    summary="Current user",
    responses={
        200: {"description": "The authenticated user"},
        401: {"description": "Missing, invalid or expired token"},
    },
)
async def get_me(
    subject: CurrentSubject,
    user_directory: UserDirectory,
) -> UserResponse:
    """Return the user the bearer token was issued for."""
    user = await user_directory.find_by_email(subject)
    if user is None:
        logger.warning("User not found for token subject: %s", subject)
        raise InvalidTokenError("User not found")

    return UserResponse.model_validate(user.without_password())
