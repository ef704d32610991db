"""Signed access tokens (HS256 JWT).

A token carries three claims: ``sub`` (the user's email), ``iat`` and
``exp``. Nothing is stored server-side; a token stays usable until ``exp``.
"""

from datetime import datetime, timedelta, timezone

import jwt

from stockroom_auth.exceptions import InvalidTokenError
from stockroom_auth.schemas import TokenPayload

REQUIRED_CLAIMS = ("sub", "iat", "exp")


def _from_timestamp(value: int | float) -> datetime:
    return datetime.fromtimestamp(value, tz=timezone.utc)


class JWTService:
    """Issue and check access tokens signed with a shared secret.

    Examples
    --------
    >>> tokens = JWTService(secret_key="change-me")
    >>> tokens.verify_token(tokens.create_access_token("ana@mail.com")).subject
    'ana@mail.com'
    """

    ALGORITHM = "HS256"
    DEFAULT_ACCESS_EXPIRE_HOURS = 24

    def __init__(
        self,
        secret_key: str,
        access_token_expire_hours: int = DEFAULT_ACCESS_EXPIRE_HOURS,
    ):
        if not secret_key:
            msg = "JWT secret key cannot be empty"
            raise ValueError(msg)

        self._secret_key = secret_key
        self._lifetime = timedelta(hours=access_token_expire_hours)

    @property
    def access_token_lifetime(self) -> timedelta:
        """How long a freshly issued token stays valid."""
        return self._lifetime

    def create_access_token(
        self,
        subject: str,
        expires_delta: timedelta | None = None,
    ) -> str:
        """Sign a token for ``subject``.

        Parameters
        ----------
        subject
            Stored in the ``sub`` claim; the user's email.
        expires_delta
            Overrides the configured lifetime. A negative value yields a
            token that is already expired.
        """
        lifetime = self._lifetime if expires_delta is None else expires_delta
        issued_at = datetime.now(tz=timezone.utc)
        claims = {
            "sub": subject,
            "iat": issued_at,
            "exp": issued_at + lifetime,
        }
        return jwt.encode(claims, self._secret_key, algorithm=self.ALGORITHM)

    def verify_token(self, token: str) -> TokenPayload:
        """Check signature, expiry and required claims.

        Raises
        ------
        InvalidTokenError
            For any token that is not well-formed, correctly signed and
            unexpired. The message names the reason (logged, not shown to
            API callers).
        """
        try:
            claims = jwt.decode(
                token,
                self._secret_key,
                algorithms=[self.ALGORITHM],
                options={"require": list(REQUIRED_CLAIMS)},
            )
        except jwt.ExpiredSignatureError as e:
            raise InvalidTokenError("Token has expired") from e
        except jwt.MissingRequiredClaimError as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
        except jwt.InvalidTokenError as e:
            raise InvalidTokenError(f"Invalid token: {e}") from e

        try:
            return TokenPayload(
                subject=claims["sub"],
                issued_at=_from_timestamp(claims["iat"]),
                expires_at=_from_timestamp(claims["exp"]),
            )
        except (TypeError, ValueError, OverflowError) as e:
            raise InvalidTokenError(f"Malformed token payload: {e}") from e
