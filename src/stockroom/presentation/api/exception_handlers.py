"""Map raised errors to HTTP responses.

Every error leaves the API with the same body shape::

    {"detail": "<message safe to show>", "code": "<ErrorCode value>"}

Domain errors carry their own code. Authentication failures always become
401 ``UNAUTHORIZED`` with a ``WWW-Authenticate: Bearer`` header. Anything
else is logged with its traceback and reported as a bare 500.
"""

import logging

from fastapi import FastAPI, Request, status
from fastapi.responses import JSONResponse

from stockroom.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from stockroom_auth import AuthError

logger = logging.getLogger(__name__)

BEARER_CHALLENGE = {"WWW-Authenticate": "Bearer"}

ERROR_CODE_TO_STATUS: dict[ErrorCode, int] = {
    ErrorCode.VALIDATION_ERROR: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_EMAIL: status.HTTP_400_BAD_REQUEST,
    ErrorCode.INVALID_QUANTITY: status.HTTP_400_BAD_REQUEST,
    ErrorCode.UNAUTHORIZED: status.HTTP_401_UNAUTHORIZED,
    ErrorCode.ENTITY_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.PRODUCT_NOT_FOUND: status.HTTP_404_NOT_FOUND,
    ErrorCode.CONFLICT: status.HTTP_409_CONFLICT,
    ErrorCode.EMAIL_ALREADY_EXISTS: status.HTTP_409_CONFLICT,
    ErrorCode.DUPLICATE_PRODUCT_NAME: status.HTTP_409_CONFLICT,
    ErrorCode.INTERNAL_ERROR: status.HTTP_500_INTERNAL_SERVER_ERROR,
}

# Used when an exception carries a code missing from the table above
_STATUS_BY_CATEGORY: tuple[tuple[type[DomainException], int], ...] = (
    (NotFoundError, status.HTTP_404_NOT_FOUND),
    (ConflictError, status.HTTP_409_CONFLICT),
    (ValidationError, status.HTTP_400_BAD_REQUEST),
)


def _get_status_for_exception(exc: DomainException) -> int:
    status_code = ERROR_CODE_TO_STATUS.get(exc.code)
    if status_code is not None:
        return status_code

    for category, category_status in _STATUS_BY_CATEGORY:
        if isinstance(exc, category):
            return category_status
    return status.HTTP_400_BAD_REQUEST


def _error_body(
    status_code: int,
    detail: str,
    code: str,
    headers: dict[str, str] | None = None,
) -> JSONResponse:
    return JSONResponse(
        status_code=status_code,
        content={"detail": detail, "code": code},
        headers=headers,
    )


async def _on_domain_exception(request: Request, exc: DomainException) -> JSONResponse:
    # details may hold user input; they go to the log only
    logger.warning(
        "%s on %s %s: %s (code=%s, details=%s)",
        type(exc).__name__,
        request.method,
        request.url.path,
        exc.message,
        exc.code.value,
        exc.details,
    )
    return _error_body(
        _get_status_for_exception(exc),
        exc.message,
        exc.code.value,
    )


async def _on_auth_error(request: Request, exc: AuthError) -> JSONResponse:
    logger.warning(
        "Rejected credentials on %s %s: %s",
        request.method,
        request.url.path,
        exc.message,
    )
    return _error_body(
        status.HTTP_401_UNAUTHORIZED,
        exc.message,
        ErrorCode.UNAUTHORIZED.value,
        headers=BEARER_CHALLENGE,
    )


async def _on_unhandled(request: Request, exc: Exception) -> JSONResponse:
    logger.exception(
        "Unhandled %s on %s %s",
        type(exc).__name__,
        request.method,
        request.url.path,
    )
    return _error_body(
        status.HTTP_500_INTERNAL_SERVER_ERROR,
        "An internal error occurred",
        ErrorCode.INTERNAL_ERROR.value,
    )


def setup_exception_handlers(app: FastAPI) -> None:
    """Install the handlers on ``app``; call once from the app factory."""
    app.add_exception_handler(DomainException, _on_domain_exception)
    app.add_exception_handler(AuthError, _on_auth_error)
    app.add_exception_handler(Exception, _on_unhandled)
