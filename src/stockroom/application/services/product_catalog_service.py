"""Product catalog service: create, look up, list and remove products."""

from __future__ import annotations

import logging
from typing import TYPE_CHECKING

from stockroom.domain.product import (
    Product,
    ProductNameAlreadyExistsError,
    ProductNotFoundError,
    ensure_valid_quantity,
)

if TYPE_CHECKING:
    from stockroom.domain.product import ProductRepository

logger = logging.getLogger(__name__)


class ProductCatalogService:
    """
    Owns product-name uniqueness and the product lifecycle.

    Lookups return None for a missing product; ``remove`` raises
    ProductNotFoundError instead.
    """

    def __init__(self, product_repository: ProductRepository):
        self._product_repo = product_repository

    async def create(self, name: str, quantity: int) -> Product:
        ensure_valid_quantity(quantity)

        existing = await self.find_by_name(name)
        if existing is not None:
            raise ProductNameAlreadyExistsError(name)

        product = await self._product_repo.create(name=name, quantity=quantity)
        logger.info("Product created: %s (%s)", product.id, product.name)
        return product

    async def find_by_id(self, product_id: str) -> Product | None:
        return await self._product_repo.find_by_id(product_id)

    async def find_by_name(self, name: str) -> Product | None:
        return await self._product_repo.find_by_name(name)

    async def list(self, name: str | None = None) -> list[Product]:
        return await self._product_repo.list_all(name_contains=name)

    async def remove(self, product_id: str) -> None:
        product = await self.find_by_id(product_id)
        if product is None:
            raise ProductNotFoundError(product_id)

        await self._product_repo.delete(product_id)
        logger.info("Product removed: %s (%s)", product_id, product.name)
