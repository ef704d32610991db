from stockroom.domain.shared.exceptions import (
    ConflictError,
    DomainException,
    ErrorCode,
    NotFoundError,
    ValidationError,
)
from stockroom.domain.shared.time import utc_now

__all__ = [
    "ConflictError",
    "DomainException",
    "ErrorCode",
    "NotFoundError",
    "ValidationError",
    "utc_now",
]
