# Database modules

from ..core.config import Settings
from .storage import JsonRecordStore
from .products import ProductDatabase
from .carts import CartDatabase
from .seed import seed_sample_products


def create_databases(settings: Settings) -> tuple[ProductDatabase, CartDatabase]:
    """Build the product and cart databases for the configured directories"""
    product_db = ProductDatabase(
        JsonRecordStore(settings.product_directory, label="product"),
        id_generation_attempts=settings.id_generation_attempts,
    )
    cart_db = CartDatabase(
        JsonRecordStore(settings.cart_directory, label="cart"),
        product_db,
        id_generation_attempts=settings.id_generation_attempts,
    )
    return product_db, cart_db


__all__ = [
    "JsonRecordStore",
    "ProductDatabase",
    "CartDatabase",
    "create_databases",
    "seed_sample_products",
]
