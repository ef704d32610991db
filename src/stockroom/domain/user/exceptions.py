"""User domain exceptions."""

from stockroom.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    ValidationError,
)


class InvalidEmailError(ValidationError):
    """Raised when an email fails the syntactic "@" check."""

    def __init__(self, email: str) -> None:
        super().__init__(
            "Email invalid",
            code=ErrorCode.INVALID_EMAIL,
            details={"email": email},
        )


class EmailAlreadyExistsError(ConflictError):
    """Email already registered."""

    def __init__(self, email: str) -> None:
        self.email = email
        super().__init__(
            "Email already in use",
            code=ErrorCode.EMAIL_ALREADY_EXISTS,
            details={"email": email},
        )


class PasswordTooLongError(ValidationError):
    """Password exceeds what the credential hasher accepts."""

    def __init__(self, max_bytes: int) -> None:
        super().__init__(
            f"Password cannot be longer than {max_bytes} bytes",
            details={"max_bytes": max_bytes},
        )
