"""SQLAlchemy implementation of UserRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.domain.user import EmailAlreadyExistsError, User, UserRepository
from stockroom.infrastructure.persistence.sqlalchemy.models import UserModel
from stockroom.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class UserRepositorySQLAlchemy(UserRepository):
    """SQLAlchemy implementation of the UserRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_email(self, email: str) -> User | None:
        stmt = select(UserModel).where(UserModel.email == email)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def create(self, user: User) -> User:
        model = self._map_to_model(user)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise EmailAlreadyExistsError(user.email) from e
            raise

        logger.info("Created user: %s (email: %s)", model.id, model.email)
        return self._map_to_domain(model)

    def _map_to_domain(self, model: UserModel) -> User:
        return User.reconstitute(
            id=model.id,
            name=model.name,
            email=model.email,
            password_hash=model.password_hash,
            created_at=model.created_at,
        )

    def _map_to_model(self, user: User) -> UserModel:
        return UserModel(
            id=user.id,
            name=user.name,
            email=user.email,
            password_hash=user.password_hash,
            created_at=user.created_at,
            updated_at=user.created_at,
        )
