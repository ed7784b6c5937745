"""In-process, dict-backed implementation of ProductRepository."""

from __future__ import annotations

import logging
import threading

from catalog.domain.exceptions import EntityNotFoundError, InvalidArgumentError
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)


class InMemoryProductRepository(ProductRepository):

    def __init__(self) -> None:
        self._store: dict[int, Product] = {}
        self._last_id = 0
        self._lock = threading.RLock()

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        if not product.is_transient:
            raise InvalidArgumentError(
                f"Product already has id {product.id}; only transient products can be created"
            )
        with self._lock:
            self._last_id += 1
            persisted = Product(name=product.name, id=self._last_id)
            self._store[persisted.id] = persisted
        logger.info("Created product #%d", persisted.id)
        return persisted

    def get_by_id(self, product_id: int) -> Product:
        with self._lock:
            product = self._store.get(product_id)
        if product is None:
            logger.debug("Product #%d not in memory store", product_id)
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def list_all(self) -> list[Product]:
        with self._lock:
            return list(self._store.values())

    def update(self, product_id: int, new_name: str | None) -> Product:
        with self._lock:
            current = self._store.get(product_id)
            if current is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            updated = current.renamed(new_name)
            self._store[product_id] = updated
        logger.info("Renamed product #%d", product_id)
        return updated

    def delete(self, product_id: int) -> None:
        with self._lock:
            if self._store.pop(product_id, None) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
        logger.info("Deleted product #%d", product_id)
