# Catalog Store Models

from .product import (
    Product,
    ProductType,
    ProductStatus,
    ProductCreateRequest,
    DEFAULT_PRODUCT_TYPE,
    DEFAULT_PRODUCT_STATUS,
)
from .cart import Cart, DeleteResult

__all__ = [
    "Product",
    "ProductType",
    "ProductStatus",
    "ProductCreateRequest",
    "DEFAULT_PRODUCT_TYPE",
    "DEFAULT_PRODUCT_STATUS",
    "Cart",
    "DeleteResult",
]
