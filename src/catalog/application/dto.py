"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass

from catalog.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a persisted product as seen by callers."""

    id: int
    name: str | None

    @classmethod
    def from_product(cls, product: Product) -> ProductDTO:
        return cls(id=product.id, name=product.name)  # type: ignore[arg-type]

    def to_dict(self) -> dict:
        return asdict(self)
