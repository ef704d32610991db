"""Authentication exceptions.

These exceptions are raised by the stockroom_auth package and by the
AuthenticationService. The API maps every AuthError to 401 Unauthorized.
"""


class AuthError(Exception):
    """Base exception for all authentication errors."""

    def __init__(self, message: str = "Authentication error"):
        self.message = message
        super().__init__(self.message)


class InvalidTokenError(AuthError):
    """Raised when a JWT token is invalid, expired, or malformed."""

    def __init__(self, message: str = "Invalid or expired token"):
        super().__init__(message)


class InvalidCredentialsError(AuthError):
    """Raised when email or password is incorrect during login.

    The same message is used for an unknown email and a wrong password.
    """

    def __init__(self, message: str = "Invalid email or password"):
        super().__init__(message)
