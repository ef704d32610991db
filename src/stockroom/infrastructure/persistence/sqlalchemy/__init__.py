"""SQLAlchemy persistence for users and products."""

from stockroom.infrastructure.persistence.sqlalchemy.models import (
    Base,
    ProductModel,
    UserModel,
)
from stockroom.infrastructure.persistence.sqlalchemy.repositories import (
    ProductRepositorySQLAlchemy,
    UserRepositorySQLAlchemy,
)

__all__ = [
    "Base",
    "ProductModel",
    "ProductRepositorySQLAlchemy",
    "UserModel",
    "UserRepositorySQLAlchemy",
]
