"""Product schemas for API request/response models."""

from datetime import datetime

from pydantic import BaseModel, ConfigDict, Field


class ProductCreateRequest(BaseModel):
    """Request schema for creating a product."""

    name: str = Field(..., min_length=1, max_length=255, description="Unique name")
    quantity: int = Field(..., ge=0, description="Units in stock")

    model_config = ConfigDict(
        json_schema_extra={
            "example": {"name": "Widget", "quantity": 5},
        },
    )


class ProductResponse(BaseModel):
    """Response schema for a single product."""

    id: str
    name: str
    quantity: int
    created_at: datetime

    model_config = ConfigDict(from_attributes=True)


class ProductListResponse(BaseModel):
    """Response schema for product listings."""

    products: list[ProductResponse]
    total: int
