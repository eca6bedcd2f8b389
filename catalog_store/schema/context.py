"""Helpers for reading the databases out of the resolver context"""

from strawberry.types import Info

from ..database import CartDatabase, ProductDatabase


def get_cart_db(info: Info) -> CartDatabase:
    return info.context["cart_db"]


def get_product_db(info: Info) -> ProductDatabase:
    return info.context["product_db"]
