"""Domain error hierarchy.

Every error raised by the domain and application layers derives from
``DomainException`` and carries a stable ``ErrorCode``; the HTTP layer maps
codes to status codes in one place.
"""

from enum import Enum
from typing import Any, ClassVar


class ErrorCode(str, Enum):
    """Machine-readable error codes returned to API clients. Do not rename."""

    VALIDATION_ERROR = "VALIDATION_ERROR"
    INVALID_EMAIL = "INVALID_EMAIL"
    INVALID_QUANTITY = "INVALID_QUANTITY"

    UNAUTHORIZED = "UNAUTHORIZED"

    ENTITY_NOT_FOUND = "ENTITY_NOT_FOUND"
    PRODUCT_NOT_FOUND = "PRODUCT_NOT_FOUND"

    CONFLICT = "CONFLICT"
    EMAIL_ALREADY_EXISTS = "EMAIL_ALREADY_EXISTS"
    DUPLICATE_PRODUCT_NAME = "DUPLICATE_PRODUCT_NAME"

    INTERNAL_ERROR = "INTERNAL_ERROR"


class DomainException(Exception):  # NOQA: N818
    """Base class for domain errors.

    Attributes
    ----------
    message
        Shown to API callers as ``detail``.
    code
        Stable ``ErrorCode``; defaults to the subclass's ``default_code``.
    details
        Extra context for logs. Never sent to callers.
    """

    default_code: ClassVar[ErrorCode] = ErrorCode.INTERNAL_ERROR

    def __init__(
        self,
        message: str,
        code: ErrorCode | None = None,
        details: dict[str, Any] | None = None,
    ):
        super().__init__(message)
        self.message = message
        self.code = code or self.default_code
        self.details = dict(details or {})

    def __str__(self) -> str:
        return self.message

    def __repr__(self) -> str:
        return f"{type(self).__name__}({self.message!r}, code={self.code.value})"


class ValidationError(DomainException):
    """Input failed a precondition check."""

    default_code = ErrorCode.VALIDATION_ERROR


class NotFoundError(DomainException):
    """The entity an operation needs does not exist."""

    default_code = ErrorCode.ENTITY_NOT_FOUND


class ConflictError(DomainException):
    """The operation would break a uniqueness rule."""

    default_code = ErrorCode.CONFLICT
