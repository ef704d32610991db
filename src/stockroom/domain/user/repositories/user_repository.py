"""User repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stockroom.domain.user.aggregates.user import User


class UserRepository(ABC):
    """Repository interface for User aggregates."""

    @abstractmethod
    async def find_by_email(self, email: str) -> Optional[User]:
        """Find a user by exact email match."""

    @abstractmethod
    async def create(self, user: User) -> User:
        """Persist a new user and return the stored record.

        Raises EmailAlreadyExistsError if the store's unique index rejects it.
        """
