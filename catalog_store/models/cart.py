"""Cart models for the catalog store"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel

from .product import Product


class Cart(BaseModel):
    """Shopping cart

    ``product`` holds snapshots copied from the product records at the time
    they were added; later changes to a product do not reach its copies.
    """
    cart_id: str
    cart_name: str
    total_price: float = 0.0
    product: list[Product] = []

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_document(self) -> dict:
        """JSON-ready dict using the camelCase field names"""
        return self.model_dump(by_alias=True, mode="json")


class DeleteResult(BaseModel):
    """Outcome of a cart or product delete"""
    deleted_id: str
    success: bool
