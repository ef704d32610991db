"""SQLAlchemy implementation of ProductRepository."""

import logging

from sqlalchemy import select
from sqlalchemy.exc import IntegrityError
from sqlalchemy.ext.asyncio import AsyncSession

from stockroom.domain.product import (
    Product,
    ProductNameAlreadyExistsError,
    ProductRepository,
)
from stockroom.infrastructure.persistence.sqlalchemy.models import ProductModel
from stockroom.infrastructure.persistence.sqlalchemy.repositories._utils import (
    is_unique_violation,
)

logger = logging.getLogger(__name__)


class ProductRepositorySQLAlchemy(ProductRepository):
    """SQLAlchemy implementation of the ProductRepository interface."""

    def __init__(self, session: AsyncSession) -> None:
        self._session = session

    async def find_by_id(self, product_id: str) -> Product | None:
        model = await self._find_model_by_id(product_id)

        if model is None:
            return None

        return self._map_to_domain(model)

    async def find_by_name(self, name: str) -> Product | None:
        stmt = select(ProductModel).where(ProductModel.name == name)
        result = await self._session.execute(stmt)
        model = result.scalar_one_or_none()

        if model is None:
            return None

        return self._map_to_domain(model)

    async def list_all(self, name_contains: str | None = None) -> list[Product]:
        stmt = select(ProductModel).order_by(ProductModel.created_at, ProductModel.id)
        if name_contains is not None:
            # LIKE wildcards in the filter match literally
            stmt = stmt.where(ProductModel.name.contains(name_contains, autoescape=True))

        result = await self._session.execute(stmt)
        models = result.scalars().all()
        return [self._map_to_domain(model) for model in models]

    async def create(self, name: str, quantity: int) -> Product:
        model = ProductModel(name=name, quantity=quantity)
        self._session.add(model)

        try:
            await self._session.flush()
        except IntegrityError as e:
            if is_unique_violation(e):
                raise ProductNameAlreadyExistsError(name) from e
            raise

        logger.info("Created product: %s (name: %s)", model.id, model.name)
        return self._map_to_domain(model)

    async def delete(self, product_id: str) -> None:
        model = await self._find_model_by_id(product_id)

        if model:
            await self._session.delete(model)
            await self._session.flush()
            logger.info("Deleted product: %s", product_id)

    async def _find_model_by_id(self, product_id: str) -> ProductModel | None:
        stmt = select(ProductModel).where(ProductModel.id == product_id)
        result = await self._session.execute(stmt)
        return result.scalar_one_or_none()

    def _map_to_domain(self, model: ProductModel) -> Product:
        return Product(
            id=model.id,
            name=model.name,
            quantity=model.quantity,
            created_at=model.created_at,
        )
