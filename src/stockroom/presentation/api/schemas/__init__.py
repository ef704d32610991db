from stockroom.presentation.api.schemas.auth import LoginRequest, TokenResponse
from stockroom.presentation.api.schemas.common import ErrorResponse, HealthResponse
from stockroom.presentation.api.schemas.products import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
)
from stockroom.presentation.api.schemas.users import RegisterRequest, UserResponse

__all__ = [
    "ErrorResponse",
    "HealthResponse",
    "LoginRequest",
    "ProductCreateRequest",
    "ProductListResponse",
    "ProductResponse",
    "RegisterRequest",
    "TokenResponse",
    "UserResponse",
]
