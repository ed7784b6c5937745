"""Application service: Update Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.repository.product_repository import ProductRepository


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int, name: str | None) -> ProductDTO:
        """Rename a product.

        Only the name changes. The id stays the one given at creation.
        """
        product = self._product_repo.update(product_id, name)
        return ProductDTO.from_product(product)
