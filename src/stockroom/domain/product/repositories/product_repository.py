"""Product repository interface."""

from abc import ABC, abstractmethod
from typing import Optional

from stockroom.domain.product.aggregates.product import Product


class ProductRepository(ABC):
    """Repository interface for Product aggregates."""

    @abstractmethod
    async def find_by_id(self, product_id: str) -> Optional[Product]:
        """Find a product by its ID."""

    @abstractmethod
    async def find_by_name(self, name: str) -> Optional[Product]:
        """Find a product by exact name match."""

    @abstractmethod
    async def list_all(self, name_contains: Optional[str] = None) -> list[Product]:
        """List products in creation order.

        With ``name_contains`` set, only products whose name contains it as
        a substring are returned.
        """

    @abstractmethod
    async def create(self, name: str, quantity: int) -> Product:
        """Persist a new product; the store assigns its ID."""

    @abstractmethod
    async def delete(self, product_id: str) -> None:
        """Delete a product by ID."""
