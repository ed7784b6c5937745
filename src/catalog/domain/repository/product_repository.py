"""Abstract repository for the Product entity.

Defined in the domain layer so the domain never depends on
infrastructure. Concrete implementations (in-memory, JSON) live in
the infrastructure layer.

Every implementation must uphold the same identity contract:

* ids come from a single counter that only ever grows, one step per
  successful ``create``; deleting a product never frees its id.
* a transient product (``id is None``) is never visible to reads.
* operations are safe to call from several threads at once.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from catalog.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def create(self, product: Product) -> Product:
        """Persist a transient product and return it with its new id.

        Raises InvalidArgumentError if ``product`` already has an id.
        """

    @abstractmethod
    def get_by_id(self, product_id: int) -> Product:
        """Return a product by its ID.

        Raises EntityNotFoundError if no live product has that id.
        """

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every live product, in insertion order."""

    @abstractmethod
    def update(self, product_id: int, new_name: str | None) -> Product:
        """Replace the name of a live product and return the new state."""

    @abstractmethod
    def delete(self, product_id: int) -> None:
        """Remove a live product. Not idempotent: a second call raises."""
