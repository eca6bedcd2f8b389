"""GraphQL mutations

Each resolver returns a ``GraphQLError`` value for catalog errors instead of
raising, so the response always carries data plus structured errors.
Repository calls do blocking file I/O and run in the threadpool, where the
per-record locks serialize concurrent requests.
"""

from typing import Optional

import strawberry
from fastapi.concurrency import run_in_threadpool
from strawberry.types import Info

from ..core.errors import CatalogError
from .context import get_cart_db, get_product_db
from .errors import to_graphql_error
from .types import Cart, CartProductInput, DeleteResult, Product, ProductInput


@strawberry.type
class Mutation:
    @strawberry.mutation
    async def create_cart(
        self,
        info: Info,
        cart_name: str,
        total_price: Optional[float] = None,
        product: Optional[list[CartProductInput]] = None,
    ) -> Optional[Cart]:
        """Create a cart; totalPrice is always derived from its products"""
        try:
            cart = await run_in_threadpool(
                get_cart_db(info).create_cart,
                cart_name,
                total_price=total_price,
                products=[item.to_model() for item in product or []],
            )
        except CatalogError as e:
            return to_graphql_error(e)
        return Cart.from_model(cart)

    @strawberry.mutation
    async def update_cart(
        self,
        info: Info,
        cart_id: str,
        cart_name: str,
        total_price: float,
        products: list[CartProductInput],
    ) -> Optional[Cart]:
        """Replace a cart's name and contents"""
        try:
            cart = await run_in_threadpool(
                get_cart_db(info).update_cart,
                cart_id,
                cart_name,
                total_price,
                [item.to_model() for item in products],
            )
        except CatalogError as e:
            return to_graphql_error(e)
        return Cart.from_model(cart)

    @strawberry.mutation
    async def delete_cart(self, info: Info, cart_id: str) -> Optional[DeleteResult]:
        try:
            result = await run_in_threadpool(get_cart_db(info).delete_cart, cart_id)
        except CatalogError as e:
            return to_graphql_error(e)
        return DeleteResult.from_model(result)

    @strawberry.mutation
    async def create_product(self, info: Info, input: ProductInput) -> Optional[Product]:
        try:
            product = await run_in_threadpool(
                get_product_db(info).create_product, input.to_request()
            )
        except CatalogError as e:
            return to_graphql_error(e)
        return Product.from_model(product)

    @strawberry.mutation
    async def delete_product(self, info: Info, product_id: str) -> Optional[DeleteResult]:
        try:
            result = await run_in_threadpool(get_product_db(info).delete_product, product_id)
        except CatalogError as e:
            return to_graphql_error(e)
        return DeleteResult.from_model(result)

    @strawberry.mutation
    async def add_products_to_cart(
        self, info: Info, cart_id: str, product_id: str
    ) -> Optional[Cart]:
        """Add a snapshot of a product to a cart"""
        try:
            cart = await run_in_threadpool(get_cart_db(info).add_product, cart_id, product_id)
        except CatalogError as e:
            return to_graphql_error(e)
        return Cart.from_model(cart)

    @strawberry.mutation
    async def remove_products_from_cart(
        self, info: Info, cart_id: str, product_id: str
    ) -> Optional[Cart]:
        """Remove the first matching product from a cart"""
        try:
            cart = await run_in_threadpool(get_cart_db(info).remove_product, cart_id, product_id)
        except CatalogError as e:
            return to_graphql_error(e)
        return Cart.from_model(cart)

    @strawberry.mutation
    async def empty_cart(self, info: Info, cart_id: str) -> Optional[Cart]:
        try:
            cart = await run_in_threadpool(get_cart_db(info).empty_cart, cart_id)
        except CatalogError as e:
            return to_graphql_error(e)
        return Cart.from_model(cart)
