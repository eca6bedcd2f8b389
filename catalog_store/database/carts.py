"""Cart storage for the catalog store"""

import logging
from typing import Optional

from pydantic import ValidationError

from ..core.errors import InvalidInputError, RecordNotFoundError, StorageError
from ..models.cart import Cart, DeleteResult
from ..models.product import Product
from .products import ProductDatabase
from .storage import JsonRecordStore

logger = logging.getLogger(__name__)


class CartDatabase:
    """Cart records kept as JSON files"""

    def __init__(
        self,
        store: JsonRecordStore,
        product_db: ProductDatabase,
        id_generation_attempts: int = 3,
    ):
        self.store = store
        self.product_db = product_db
        self.id_generation_attempts = id_generation_attempts

    def get_cart(self, cart_id: str) -> Cart:
        """Get a cart by ID"""
        self._require_cart(cart_id)
        return self._load(cart_id)

    def get_all_carts(self) -> list[Cart]:
        """Get all carts"""
        return [self._to_cart(doc) for doc in self.store.read_all()]

    def create_cart(
        self,
        cart_name: str,
        total_price: Optional[float] = None,
        products: Optional[list[Product]] = None,
    ) -> Cart:
        """Create a new cart, optionally pre-filled with product snapshots"""
        self._validate_name(cart_name)
        self._validate_products(products or [])

        cart = Cart(
            cart_id=self.store.new_identifier(self.id_generation_attempts),
            cart_name=cart_name,
            product=list(products or []),
        )
        self._recalculate_total(cart, requested=total_price)
        with self.store.lock(cart.cart_id):
            self._save(cart)

        logger.info(f"Cart {cart.cart_id} created: {cart.cart_name}")
        return cart

    def update_cart(
        self,
        cart_id: str,
        cart_name: str,
        total_price: Optional[float],
        products: list[Product],
    ) -> Cart:
        """Replace a cart's name and contents"""
        self._validate_name(cart_name)
        self._validate_products(products)

        with self.store.lock(cart_id):
            self._require_cart(cart_id)
            cart = Cart(cart_id=cart_id, cart_name=cart_name, product=list(products))
            self._recalculate_total(cart, requested=total_price)
            self._save(cart)
        return cart

    def delete_cart(self, cart_id: str) -> DeleteResult:
        """Delete a cart"""
        with self.store.lock(cart_id):
            self._require_cart(cart_id)
            try:
                self.store.delete(cart_id)
            except OSError as e:
                logger.warning(f"Failed to delete cart {cart_id}: {e}")
                return DeleteResult(deleted_id=cart_id, success=False)

        logger.info(f"Cart {cart_id} deleted")
        return DeleteResult(deleted_id=cart_id, success=True)

    def add_product(self, cart_id: str, product_id: str) -> Cart:
        """Append a snapshot of a product to the cart"""
        with self.store.lock(cart_id):
            self._require_cart(cart_id)
            product = self.product_db.get_product(product_id)

            cart = self._load(cart_id)
            cart.product.append(product)
            self._recalculate_total(cart)
            self._save(cart)
        return cart

    def remove_product(self, cart_id: str, product_id: str) -> Cart:
        """
        Remove the first item matching ``product_id`` from the cart.

        The product record itself must still exist. A cart that does not
        hold the product is saved and returned unchanged.
        """
        with self.store.lock(cart_id):
            self._require_cart(cart_id)
            self.product_db.get_product(product_id)

            cart = self._load(cart_id)
            index = next(
                (i for i, item in enumerate(cart.product) if item.product_id == product_id),
                None,
            )
            if index is not None:
                del cart.product[index]
                self._recalculate_total(cart)
            self._save(cart)
        return cart

    def empty_cart(self, cart_id: str) -> Cart:
        """Clear all items from cart"""
        with self.store.lock(cart_id):
            self._require_cart(cart_id)
            cart = self._load(cart_id)
            cart.product = []
            self._recalculate_total(cart)
            self._save(cart)
        return cart

    def _require_cart(self, cart_id: str) -> None:
        if not self.store.exists(cart_id):
            raise RecordNotFoundError("Cart not found")

    def _load(self, cart_id: str) -> Cart:
        return self._to_cart(self.store.read(cart_id))

    def _save(self, cart: Cart) -> None:
        self.store.write(cart.cart_id, cart.to_document())

    @staticmethod
    def _to_cart(document: dict) -> Cart:
        try:
            return Cart.model_validate(document)
        except ValidationError as e:
            raise StorageError(f"Invalid cart record: {e}") from e

    @staticmethod
    def _validate_name(cart_name: str) -> None:
        if not cart_name or not cart_name.strip():
            raise InvalidInputError("Name must be at least 1 character long")

    @staticmethod
    def _validate_products(products: list[Product]) -> None:
        if any(item.product_price < 0 for item in products):
            raise InvalidInputError("Price must not be negative")

    @staticmethod
    def _recalculate_total(cart: Cart, requested: Optional[float] = None) -> None:
        """Recalculate cart total; a caller-supplied total is only checked"""
        cart.total_price = sum((item.product_price for item in cart.product), 0.0)
        if requested is not None and requested != cart.total_price:
            logger.warning(
                f"Ignoring totalPrice {requested} for cart {cart.cart_id}; "
                f"contents sum to {cart.total_price}"
            )
