"""Auth schemas and data structures."""

from dataclasses import dataclass
from datetime import datetime


@dataclass(frozen=True)
class TokenPayload:
    """Decoded JWT token payload.

    Attributes
    ----------
    subject
        The identity the token was issued for (the user's email)
    issued_at
        Token issuance timestamp
    expires_at
        Token expiration timestamp
    """

    subject: str
    issued_at: datetime
    expires_at: datetime

    def is_expired(self) -> bool:
        """Check if the token has expired."""
        return datetime.now(tz=self.expires_at.tzinfo) > self.expires_at
