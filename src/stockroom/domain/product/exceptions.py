"""Product domain exceptions."""

from stockroom.domain.shared.exceptions import (
    ConflictError,
    ErrorCode,
    NotFoundError,
    ValidationError,
)


class InvalidQuantityError(ValidationError):
    """Quantity must be a non-negative integer."""

    def __init__(self, quantity: int) -> None:
        super().__init__(
            "Quantity cannot be negative",
            code=ErrorCode.INVALID_QUANTITY,
            details={"quantity": quantity},
        )


class ProductNameAlreadyExistsError(ConflictError):
    """Another product already uses this name."""

    def __init__(self, name: str) -> None:
        self.name = name
        super().__init__(
            "Name already in use",
            code=ErrorCode.DUPLICATE_PRODUCT_NAME,
            details={"name": name},
        )


class ProductNotFoundError(NotFoundError):
    """No product with the given id."""

    def __init__(self, product_id: str) -> None:
        self.product_id = product_id
        super().__init__(
            "Product was not found",
            code=ErrorCode.PRODUCT_NOT_FOUND,
            details={"product_id": product_id},
        )
