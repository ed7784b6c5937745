"""Product entity.

A Product is identified by a surrogate integer key that only the
repository hands out. Before it is persisted a Product is *transient*
and has no id at all.
"""

from __future__ import annotations

from dataclasses import dataclass, replace


@dataclass(frozen=True)
class Product:
    """A product record.

    There is no setter for ``id``: identity is only given by a
    repository's ``create`` path, which builds a new snapshot with the
    allocated id. Renaming also yields a new snapshot.
    """

    name: str | None = None
    id: int | None = None

    @classmethod
    def new(cls, name: str | None = None) -> Product:
        """Build a transient product (no id yet)."""
        return cls(name=name)

    @property
    def is_transient(self) -> bool:
        return self.id is None

    def renamed(self, new_name: str | None) -> Product:
        """Return a copy carrying ``new_name``; the id is untouched."""
        return replace(self, name=new_name)
