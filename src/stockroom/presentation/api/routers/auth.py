"""Authentication router: exchange email and password for an access token."""

import logging

from fastapi import APIRouter, Depends

from stockroom.presentation.api.dependencies import AuthService, get_jwt_service
from stockroom.presentation.api.schemas.auth import LoginRequest, TokenResponse
from stockroom.presentation.api.schemas.common import ErrorResponse
from stockroom_auth import JWTService

logger = logging.getLogger(__name__)

router = APIRouter()


@router.post(
    "/login",
    summary="Log in",
    responses={
        200: {"description": "Access token issued"},
        400: {"model": ErrorResponse, "description": "Malformed email"},
        401: {"model": ErrorResponse, "description": "Invalid email or password"},
    },
)
async def login(
    request: LoginRequest,
    auth_service: AuthService,
    jwt_service: JWTService = Depends(get_jwt_service),
) -> TokenResponse:
    """
    Authenticate with email and password.

    Unknown email and wrong password produce the same 401 response.
    """
    result = await auth_service.login(email=request.email, password=request.password)

    return TokenResponse(
        access_token=result.access_token,
        expires_in=int(jwt_service.access_token_lifetime.total_seconds()),
    )
