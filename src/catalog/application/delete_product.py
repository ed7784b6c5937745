"""Application service: Delete Product use case.

Deleting an unknown id raises EntityNotFoundError. Callers that want
idempotent deletes catch it themselves.
"""

from __future__ import annotations

from catalog.domain.repository.product_repository import ProductRepository


class DeleteProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, product_id: int) -> None:
        self._product_repo.delete(product_id)
