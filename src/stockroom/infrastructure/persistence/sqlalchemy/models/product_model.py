"""SQLAlchemy model for Product aggregate."""

from uuid import uuid4

from sqlalchemy import CheckConstraint, Integer, String
from sqlalchemy.orm import Mapped, mapped_column

from stockroom.infrastructure.persistence.sqlalchemy.models.base import (
    Base,
    TimestampMixin,
)


def _new_product_id() -> str:
    return str(uuid4())


class ProductModel(Base, TimestampMixin):
    """SQLAlchemy model for persisting Product aggregates.

    The id is generated here, on insert, so callers never choose it.
    """

    __tablename__ = "products"
    __table_args__ = (
        CheckConstraint("quantity >= 0", name="ck_products_quantity_non_negative"),
    )

    id: Mapped[str] = mapped_column(
        String(36),
        primary_key=True,
        default=_new_product_id,
    )
    name: Mapped[str] = mapped_column(
        String(255),
        unique=True,
        nullable=False,
        index=True,
    )
    quantity: Mapped[int] = mapped_column(Integer, nullable=False)

    def __repr__(self) -> str:
        return (
            f"<ProductModel(id={self.id}, name={self.name}, "
            f"quantity={self.quantity})>"
        )
