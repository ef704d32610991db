from stockroom.infrastructure.persistence.sqlalchemy.repositories.product_repository import (
    ProductRepositorySQLAlchemy,
)
from stockroom.infrastructure.persistence.sqlalchemy.repositories.user_repository import (
    UserRepositorySQLAlchemy,
)

__all__ = [
    "ProductRepositorySQLAlchemy",
    "UserRepositorySQLAlchemy",
]
