"""Product domain - the product catalog.

Product names are unique. Products are created, read, listed and deleted;
there is no update path.
"""

from stockroom.domain.product.aggregates import Product, ensure_valid_quantity
from stockroom.domain.product.exceptions import (
    InvalidQuantityError,
    ProductNameAlreadyExistsError,
    ProductNotFoundError,
)
from stockroom.domain.product.repositories import ProductRepository

__all__ = [
    "InvalidQuantityError",
    "Product",
    "ProductNameAlreadyExistsError",
    "ProductNotFoundError",
    "ProductRepository",
    "ensure_valid_quantity",
]
