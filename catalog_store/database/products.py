"""Product storage for the catalog store"""

import logging

from pydantic import ValidationError

from ..core.errors import InvalidInputError, RecordNotFoundError, StorageError
from ..models.cart import DeleteResult
from ..models.product import (
    Product,
    ProductCreateRequest,
    DEFAULT_PRODUCT_TYPE,
    DEFAULT_PRODUCT_STATUS,
)
from .storage import JsonRecordStore

logger = logging.getLogger(__name__)


class ProductDatabase:
    """Product records kept as JSON files"""

    def __init__(self, store: JsonRecordStore, id_generation_attempts: int = 3):
        self.store = store
        self.id_generation_attempts = id_generation_attempts

    def get_product(self, product_id: str) -> Product:
        """Get a product by ID"""
        if not self.store.exists(product_id):
            raise RecordNotFoundError("Product not found")
        return self._to_product(self.store.read(product_id))

    def get_all_products(self) -> list[Product]:
        """Get all products"""
        return [self._to_product(doc) for doc in self.store.read_all()]

    def create_product(self, request: ProductCreateRequest) -> Product:
        """
        Create and persist a new product.

        Any ``product_id`` on the request is ignored; a fresh identifier is
        always generated. Omitted type and status fall back to the defaults.
        """
        if not request.product_name or not request.product_name.strip():
            raise InvalidInputError("Name must be at least 1 character long")
        if request.product_price < 0:
            raise InvalidInputError("Price must not be negative")

        product = Product(
            product_id=self.store.new_identifier(self.id_generation_attempts),
            product_name=request.product_name,
            product_price=request.product_price,
            product_type=request.product_type or DEFAULT_PRODUCT_TYPE,
            product_status=request.product_status or DEFAULT_PRODUCT_STATUS,
        )
        with self.store.lock(product.product_id):
            self.store.write(product.product_id, product.to_document())

        logger.info(f"Product {product.product_id} created: {product.product_name}")
        return product

    def delete_product(self, product_id: str) -> DeleteResult:
        """Delete a product; carts keep their snapshots of it"""
        with self.store.lock(product_id):
            if not self.store.exists(product_id):
                raise RecordNotFoundError("Product not found")
            try:
                self.store.delete(product_id)
            except OSError as e:
                logger.warning(f"Failed to delete product {product_id}: {e}")
                return DeleteResult(deleted_id=product_id, success=False)

        logger.info(f"Product {product_id} deleted")
        return DeleteResult(deleted_id=product_id, success=True)

    def is_empty(self) -> bool:
        return not self.store.list_identifiers()

    @staticmethod
    def _to_product(document: dict) -> Product:
        try:
            return Product.model_validate(document)
        except ValidationError as e:
            raise StorageError(f"Invalid product record: {e}") from e
