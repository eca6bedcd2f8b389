"""GraphQL object and input types"""

from typing import Optional

import strawberry

from ..models import cart as cart_models
from ..models import product as product_models

ProductType = strawberry.enum(product_models.ProductType, name="ProductType")
ProductStatus = strawberry.enum(product_models.ProductStatus, name="ProductStatus")


@strawberry.type
class Product:
    product_id: str
    product_name: str
    product_price: float
    product_type: ProductType
    product_status: ProductStatus

    @classmethod
    def from_model(cls, product: product_models.Product) -> "Product":
        return cls(
            product_id=product.product_id,
            product_name=product.product_name,
            product_price=product.product_price,
            product_type=product.product_type,
            product_status=product.product_status,
        )


@strawberry.type
class Cart:
    cart_id: str
    cart_name: str
    total_price: float
    product: list[Product]

    @classmethod
    def from_model(cls, cart: cart_models.Cart) -> "Cart":
        return cls(
            cart_id=cart.cart_id,
            cart_name=cart.cart_name,
            total_price=cart.total_price,
            product=[Product.from_model(item) for item in cart.product],
        )


@strawberry.type
class DeleteResult:
    deleted_id: str
    success: bool

    @classmethod
    def from_model(cls, result: cart_models.DeleteResult) -> "DeleteResult":
        return cls(deleted_id=result.deleted_id, success=result.success)


@strawberry.input
class ProductInput:
    """New product fields; a supplied productId is ignored"""
    product_name: str
    product_price: float
    product_id: Optional[str] = None
    product_type: Optional[ProductType] = None
    product_status: Optional[ProductStatus] = None

    def to_request(self) -> product_models.ProductCreateRequest:
        return product_models.ProductCreateRequest(
            product_name=self.product_name,
            product_price=self.product_price,
            product_id=self.product_id,
            product_type=self.product_type,
            product_status=self.product_status,
        )


@strawberry.input
class CartProductInput:
    """Product snapshot stored directly in a cart"""
    product_id: str
    product_name: str
    product_price: float
    product_type: Optional[ProductType] = None
    product_status: Optional[ProductStatus] = None

    def to_model(self) -> product_models.Product:
        return product_models.Product(
            product_id=self.product_id,
            product_name=self.product_name,
            product_price=self.product_price,
            product_type=self.product_type or product_models.DEFAULT_PRODUCT_TYPE,
            product_status=self.product_status or product_models.DEFAULT_PRODUCT_STATUS,
        )
