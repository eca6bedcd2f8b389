"""GraphQL queries"""

from typing import Optional

import strawberry
from fastapi.concurrency import run_in_threadpool
from strawberry.types import Info

from ..core.errors import CatalogError
from .context import get_cart_db, get_product_db
from .errors import to_graphql_error
from .types import Cart, Product


@strawberry.type
class Query:
    @strawberry.field
    async def get_cart_by_id(self, info: Info, cart_id: str) -> Optional[Cart]:
        """Get a cart by ID"""
        try:
            cart = await run_in_threadpool(get_cart_db(info).get_cart, cart_id)
        except CatalogError as e:
            return to_graphql_error(e)
        return Cart.from_model(cart)

    @strawberry.field
    async def get_all_carts(self, info: Info) -> Optional[list[Cart]]:
        """Every stored cart, in directory order"""
        try:
            carts = await run_in_threadpool(get_cart_db(info).get_all_carts)
        except CatalogError as e:
            return to_graphql_error(e)
        return [Cart.from_model(cart) for cart in carts]

    @strawberry.field
    async def get_product_by_id(self, info: Info, product_id: str) -> Optional[Product]:
        """Get a product by ID"""
        try:
            product = await run_in_threadpool(get_product_db(info).get_product, product_id)
        except CatalogError as e:
            return to_graphql_error(e)
        return Product.from_model(product)

    @strawberry.field
    async def get_all_products(self, info: Info) -> Optional[list[Product]]:
        """Every stored product, in directory order"""
        try:
            products = await run_in_threadpool(get_product_db(info).get_all_products)
        except CatalogError as e:
            return to_graphql_error(e)
        return [Product.from_model(product) for product in products]
