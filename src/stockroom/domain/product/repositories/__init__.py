from stockroom.domain.product.repositories.product_repository import (
    ProductRepository,
)

__all__ = ["ProductRepository"]
