"""Products router for catalog endpoints. Every route requires a token."""

import logging
from typing import Annotated

from fastapi import APIRouter, Depends, Query, status

from stockroom.domain.product import ProductNotFoundError
from stockroom.presentation.api.dependencies import (
    DBSession,
    ProductCatalog,
    get_current_subject,
)
from stockroom.presentation.api.schemas.common import ErrorResponse
from stockroom.presentation.api.schemas.products import (
    ProductCreateRequest,
    ProductListResponse,
    ProductResponse,
)

logger = logging.getLogger(__name__)

router = APIRouter(dependencies=[Depends(get_current_subject)])

NameFilter = Annotated[
    str | None,
    Query(description="Only products whose name contains this text"),
]


@router.post(
    "",
    status_code=status.HTTP_201_CREATED,
    summary="Create product",
    responses={
        201: {"description": "Product created"},
        409: {"model": ErrorResponse, "description": "Name already in use"},
    },
)
async def create_product(
    request: ProductCreateRequest,
    catalog: ProductCatalog,
    session: DBSession,
) -> ProductResponse:
    """Add a product to the catalog. Names are unique."""
    product = await catalog.create(name=request.name, quantity=request.quantity)
    await session.commit()

    return ProductResponse.model_validate(product)


@router.get(
    "",
    summary="List products",
    responses={
        200: {"description": "Products in creation order"},
    },
)
async def list_products(
    catalog: ProductCatalog,
    name: NameFilter = None,
) -> ProductListResponse:
    """List all products, optionally filtered by a name substring."""
    products = await catalog.list(name=name)

    return ProductListResponse(
        products=[ProductResponse.model_validate(p) for p in products],
        total=len(products),
    )


@router.get(
    "/{product_id}",
    summary="Get product",
    responses={
        200: {"description": "The product"},
        404: {"model": ErrorResponse, "description": "Product was not found"},
    },
)
async def get_product(
    product_id: str,
    catalog: ProductCatalog,
) -> ProductResponse:
    product = await catalog.find_by_id(product_id)
    if product is None:
        raise ProductNotFoundError(product_id)

    return ProductResponse.model_validate(product)


@router.delete(
    "/{product_id}",
    status_code=status.HTTP_204_NO_CONTENT,
    summary="Delete product",
    responses={
        204: {"description": "Product deleted"},
        404: {"model": ErrorResponse, "description": "Product was not found"},
    },
)
async def delete_product(
    product_id: str,
    catalog: ProductCatalog,
    session: DBSession,
) -> None:
    """Delete a product permanently."""
    await catalog.remove(product_id)
    await session.commit()
