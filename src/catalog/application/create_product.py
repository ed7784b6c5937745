"""Application service: Create Product use case."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.model.product import Product
from catalog.domain.repository.product_repository import ProductRepository


class CreateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str | None) -> ProductDTO:
        """Add a new product; the repository assigns its id.

        No name rules apply here: empty and missing names are stored as given.
        """
        product = self._product_repo.create(Product.new(name))
        return ProductDTO.from_product(product)
