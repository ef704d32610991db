"""Product aggregate."""

from dataclasses import dataclass, field
from datetime import datetime

from stockroom.domain.product.exceptions import InvalidQuantityError
from stockroom.domain.shared.time import utc_now


@dataclass(frozen=True)
class Product:
    """A catalog entry. The id is assigned by the store on creation."""

    id: str
    name: str
    quantity: int
    created_at: datetime = field(default_factory=utc_now)

    def __post_init__(self) -> None:
        ensure_valid_quantity(self.quantity)


def ensure_valid_quantity(quantity: int) -> None:
    if quantity < 0:
        raise InvalidQuantityError(quantity)
