from stockroom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)
from stockroom.infrastructure.persistence.sqlalchemy.models.product_model import (
    ProductModel,
)
from stockroom.infrastructure.persistence.sqlalchemy.models.user_model import (
    UserModel,
)

__all__ = [
    "Base",
    "ProductModel",
    "TimestampMixin",
    "UserModel",
]
