"""Application service: Show Product use case (query)."""

from __future__ import annotations

from catalog.application.dto import ProductDTO
from catalog.domain.repository.product_repository import ProductRepository


class ShowProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> ProductDTO:
        return ProductDTO.from_product(self._product_repo.get_by_id(product_id))
