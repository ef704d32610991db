"""Credential hashing with bcrypt.

Stored user records only ever hold the output of ``hash``; the plaintext
secret is dropped as soon as it has been hashed or checked.
"""

import bcrypt

_ENCODING = "utf-8"

# bcrypt only reads this many bytes of a secret; longer input is rejected
MAX_SECRET_BYTES = 72


def secret_byte_length(secret: str) -> int:
    return len(secret.encode(_ENCODING))


class PasswordHashingService:
    """Salted one-way hashing of user secrets.

    Every call to ``hash`` draws a fresh salt, so two hashes of the same
    secret differ while both still verify. The cost factor is embedded in the
    hash itself, which lets hashes made with other cost factors verify too.

    Examples
    --------
    >>> hasher = PasswordHashingService(rounds=4)
    >>> stored = hasher.hash("pw123")
    >>> hasher.verify("pw123", stored)
    True
    """

    DEFAULT_ROUNDS = 12

    def __init__(self, rounds: int = DEFAULT_ROUNDS):
        """
        Parameters
        ----------
        rounds
            bcrypt cost factor (log2 of the key expansion iterations).
            Tests pass a low value to stay fast.
        """
        self._rounds = rounds

    @property
    def rounds(self) -> int:
        return self._rounds

    def hash(self, secret: str) -> str:
        """Return the bcrypt hash of ``secret`` (``$2b$<rounds>$...``).

        Callers keep ``secret`` within ``MAX_SECRET_BYTES``; bcrypt raises
        ValueError otherwise.
        """
        digest = bcrypt.hashpw(
            secret.encode(_ENCODING),
            bcrypt.gensalt(rounds=self._rounds),
        )
        return digest.decode(_ENCODING)

    def verify(self, secret: str, hash_value: str) -> bool:
        """Check ``secret`` against a stored hash.

        A stored value that is not a bcrypt hash never matches.
        """
        try:
            return bcrypt.checkpw(secret.encode(_ENCODING), hash_value.encode(_ENCODING))
        except (ValueError, TypeError):
            return False
