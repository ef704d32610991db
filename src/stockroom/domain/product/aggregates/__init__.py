from stockroom.domain.product.aggregates.product import Product, ensure_valid_quantity

__all__ = ["Product", "ensure_valid_quantity"]
