"""User aggregate."""

from datetime import datetime
from uuid import UUID, uuid4

from stockroom.domain.shared.time import utc_now


class User:
    """
    User aggregate root.

    Holds the password hash for credential checks. Anything handed back to
    API callers goes through ``without_password()`` first.
    """

    def __init__(
        self,
        name: str,
        email: str,
        password_hash: str,
        id: UUID | None = None,
        created_at: datetime | None = None,
    ):
        self._id = id or uuid4()
        self._name = name
        self._email = email
        self._password_hash = password_hash
        self._created_at = created_at or utc_now()

    @property
    def id(self) -> UUID:
        return self._id

    @property
    def name(self) -> str:
        return self._name

    @property
    def email(self) -> str:
        return self._email

    @property
    def password_hash(self) -> str:
        return self._password_hash

    @property
    def created_at(self) -> datetime:
        return self._created_at

    def without_password(self) -> "User":
        """Return a copy with the password hash blanked out."""
        return User(
            id=self._id,
            name=self._name,
            email=self._email,
            password_hash="",
            created_at=self._created_at,
        )

    @classmethod
    def create(cls, name: str, email: str, password_hash: str) -> "User":
        return cls(name=name, email=email, password_hash=password_hash)

    @classmethod
    def reconstitute(
        cls,
        id: UUID,
        name: str,
        email: str,
        password_hash: str,
        created_at: datetime,
    ) -> "User":
        return cls(
            id=id,
            name=name,
            email=email,
            password_hash=password_hash,
            created_at=created_at,
        )

    def __eq__(self, other: object) -> bool:
        if not isinstance(other, User):
            return NotImplemented
        return self._id == other._id

    def __hash__(self) -> int:
        return hash(self._id)

    def __repr__(self) -> str:
        return f"User(id={self._id}, email={self._email})"
