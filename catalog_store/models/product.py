"""Product models for the catalog store"""

from pydantic import BaseModel
from pydantic.alias_generators import to_camel
from typing import Optional
from enum import Enum


class ProductType(str, Enum):
    GEL = "GEL"
    POLISH = "POLISH"
    ACRYLIC = "ACRYLIC"
    TOOL = "TOOL"


class ProductStatus(str, Enum):
    IN_STOCK = "IN_STOCK"
    LOW_STOCK = "LOW_STOCK"
    OUT_OF_STOCK = "OUT_OF_STOCK"


DEFAULT_PRODUCT_TYPE = ProductType.GEL
DEFAULT_PRODUCT_STATUS = ProductStatus.IN_STOCK


class Product(BaseModel):
    """Product record, stored as ``<product_id>.json``"""
    product_id: str
    product_name: str
    product_price: float
    product_type: ProductType = DEFAULT_PRODUCT_TYPE
    product_status: ProductStatus = DEFAULT_PRODUCT_STATUS

    class Config:
        alias_generator = to_camel
        populate_by_name = True

    def to_document(self) -> dict:
        """JSON-ready dict using the camelCase field names"""
        return self.model_dump(by_alias=True, mode="json")


class ProductCreateRequest(BaseModel):
    """Fields accepted when creating a product"""
    product_name: str
    product_price: float
    product_id: Optional[str] = None  # ignored, identifiers are always generated
    product_type: Optional[ProductType] = None
    product_status: Optional[ProductStatus] = None
