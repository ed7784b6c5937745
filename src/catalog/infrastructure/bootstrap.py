"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Configuration comes from the environment:

``CATALOG_DATA_DIR``
    Directory holding ``products.json``. Defaults to ``data/`` at the
    repo root.
``CATALOG_BACKEND``
    ``json`` (default) or ``memory``.
"""

from __future__ import annotations

import logging
import os
from pathlib import Path

from catalog.domain.exceptions import InvalidArgumentError
from catalog.domain.repository.product_repository import ProductRepository
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from catalog.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

logger = logging.getLogger(__name__)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"

_BACKENDS = ("json", "memory")

_memory_repository: InMemoryProductRepository | None = None


def data_dir() -> Path:
    configured = os.environ.get("CATALOG_DATA_DIR")
    return Path(configured) if configured else _DEFAULT_DATA_DIR


def backend_name() -> str:
    name = os.environ.get("CATALOG_BACKEND", "json").strip().lower()
    if name not in _BACKENDS:
        raise InvalidArgumentError(
            f"Unknown CATALOG_BACKEND '{name}'. Expected one of: {', '.join(_BACKENDS)}"
        )
    return name


def product_repository() -> ProductRepository:
    global _memory_repository

    backend = backend_name()
    logger.debug("Using %s product backend", backend)
    if backend == "memory":
        # One instance per process.
        if _memory_repository is None:
            _memory_repository = InMemoryProductRepository()
        return _memory_repository
    return JsonProductRepository(data_dir() / "products.json")


def reset_memory_repository() -> None:
    """Drop the process-wide in-memory store."""
    global _memory_repository
    _memory_repository = None
