"""JSON-file-backed implementation of ProductRepository.

The file holds a single document::

    {"last_id": 3, "products": [{"id": 2, "name": "Gadget"}, ...]}

``last_id`` is the high-water mark of the id counter. It is stored
separately from the products so that deleting the newest product does
not let its id be handed out again, even after a restart.

Every read and every load/modify/persist cycle runs under an OS-level
lock on ``<file>.lock``, so separate processes (one CLI call each) never
see the same ``last_id``.
"""

from __future__ import annotations

import json
import logging
import os
import tempfile
import threading
from collections.abc import Iterator
from contextlib import contextmanager
from pathlib import Path

from filelock import FileLock

from catalog.domain.exceptions import (
    EntityNotFoundError,
    InvalidArgumentError,
    StorageUnavailableError,
)
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository

logger = logging.getLogger(__name__)

# One lock per file, shared by every repository instance pointing at it.
_thread_locks: dict[Path, threading.RLock] = {}
_thread_locks_guard = threading.Lock()


def _thread_lock_for(path: Path) -> threading.RLock:
    with _thread_locks_guard:
        return _thread_locks.setdefault(path, threading.RLock())


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path.resolve()
        self._ensure_directory()
        self._thread_lock = _thread_lock_for(self._file_path)
        self._file_lock = FileLock(
            str(self._file_path.with_name(self._file_path.name + ".lock"))
        )
        with self._locked():
            self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def create(self, product: Product) -> Product:
        if not product.is_transient:
            raise InvalidArgumentError(
                f"Product already has id {product.id}; only transient products can be created"
            )
        with self._locked():
            last_id, products = self._load()
            persisted = Product(name=product.name, id=last_id + 1)
            products[persisted.id] = persisted
            self._persist(persisted.id, products)
        logger.info("Created product #%d in %s", persisted.id, self._file_path)
        return persisted

    def get_by_id(self, product_id: int) -> Product:
        with self._locked():
            _, products = self._load()
        product = products.get(product_id)
        if product is None:
            logger.debug("Product #%d not in %s", product_id, self._file_path)
            raise EntityNotFoundError(f"Product #{product_id} not found")
        return product

    def list_all(self) -> list[Product]:
        with self._locked():
            _, products = self._load()
        return list(products.values())

    def update(self, product_id: int, new_name: str | None) -> Product:
        with self._locked():
            last_id, products = self._load()
            current = products.get(product_id)
            if current is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            updated = current.renamed(new_name)
            products[product_id] = updated
            self._persist(last_id, products)
        logger.info("Renamed product #%d in %s", product_id, self._file_path)
        return updated

    def delete(self, product_id: int) -> None:
        with self._locked():
            last_id, products = self._load()
            if products.pop(product_id, None) is None:
                raise EntityNotFoundError(f"Product #{product_id} not found")
            self._persist(last_id, products)
        logger.info("Deleted product #%d from %s", product_id, self._file_path)

    # --- Locking --------------------------------------------------------------

    @contextmanager
    def _locked(self) -> Iterator[None]:
        with self._thread_lock:
            try:
                self._file_lock.acquire()
            except OSError as exc:
                logger.error("Could not lock %s: %s", self._file_lock.lock_file, exc)
                raise StorageUnavailableError(
                    f"Product store at {self._file_path} cannot be locked"
                ) from exc
            try:
                yield
            finally:
                self._file_lock.release()

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> tuple[int, dict[int, Product]]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            items = raw["products"]
            products = {
                item["id"]: Product(name=item.get("name"), id=item["id"])
                for item in items
            }
            if len(products) != len(items):
                raise ValueError("duplicate product ids")
            last_id = max([raw.get("last_id", 0), *products.keys()])
        except (OSError, ValueError, KeyError, TypeError) as exc:
            logger.error("Could not read %s: %s", self._file_path, exc)
            raise StorageUnavailableError(
                f"Product store at {self._file_path} is unreadable"
            ) from exc
        return last_id, products

    def _persist(self, last_id: int, products: dict[int, Product]) -> None:
        raw = {
            "last_id": last_id,
            "products": [{"id": p.id, "name": p.name} for p in products.values()],
        }
        self._write_atomically(json.dumps(raw, indent=2) + "\n")

    # --- File helpers ---------------------------------------------------------

    def _write_atomically(self, text: str) -> None:
        tmp_path: Path | None = None
        replaced = False
        try:
            with tempfile.NamedTemporaryFile(
                "w",
                encoding="utf-8",
                dir=self._file_path.parent,
                prefix=self._file_path.name + ".",
                suffix=".tmp",
                delete=False,
            ) as tmp:
                tmp_path = Path(tmp.name)
                tmp.write(text)
            os.replace(tmp_path, self._file_path)
            replaced = True
        except OSError as exc:
            logger.error("Could not write %s: %s", self._file_path, exc)
            raise StorageUnavailableError(
                f"Product store at {self._file_path} is not writable"
            ) from exc
        finally:
            if tmp_path is not None and not replaced:
                tmp_path.unlink(missing_ok=True)

    def _ensure_directory(self) -> None:
        try:
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
        except OSError as exc:
            logger.error("Could not create %s: %s", self._file_path.parent, exc)
            raise StorageUnavailableError(
                f"Cannot create data directory {self._file_path.parent}"
            ) from exc

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._persist(0, {})
