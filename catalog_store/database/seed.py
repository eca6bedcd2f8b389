"""Sample product catalog for local development"""

import logging

from ..models.product import ProductCreateRequest, ProductType, ProductStatus
from .products import ProductDatabase

logger = logging.getLogger(__name__)

SAMPLE_PRODUCTS: list[ProductCreateRequest] = [
    ProductCreateRequest(
        product_name="Builder Gel Clear 15ml",
        product_price=14.99,
        product_type=ProductType.GEL,
    ),
    ProductCreateRequest(
        product_name="Color Gel Ruby Red 10ml",
        product_price=9.5,
        product_type=ProductType.GEL,
    ),
    ProductCreateRequest(
        product_name="Classic Polish Nude 12ml",
        product_price=7.0,
        product_type=ProductType.POLISH,
    ),
    ProductCreateRequest(
        product_name="Acrylic Powder Pink 30g",
        product_price=18.0,
        product_type=ProductType.ACRYLIC,
        product_status=ProductStatus.LOW_STOCK,
    ),
    ProductCreateRequest(
        product_name="Cuticle Pusher Stainless",
        product_price=5.25,
        product_type=ProductType.TOOL,
        product_status=ProductStatus.OUT_OF_STOCK,
    ),
]


def seed_sample_products(product_db: ProductDatabase) -> int:
    """
    Fill an empty product directory with the sample catalog.

    Returns:
        Number of products created (0 when products already exist)
    """
    if not product_db.is_empty():
        return 0

    for request in SAMPLE_PRODUCTS:
        product_db.create_product(request)

    logger.info(f"Seeded {len(SAMPLE_PRODUCTS)} sample products")
    return len(SAMPLE_PRODUCTS)
