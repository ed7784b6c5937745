"""Integration tests for the product use cases.

Uses the in-memory repository — no file I/O.
"""

import pytest

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import EntityNotFoundError, StorageUnavailableError
from catalog.infrastructure.persistence.in_memory_product_repository import (
    InMemoryProductRepository,
)
from tests.fakes import UnavailableProductRepository


@pytest.fixture
def repo():
    return InMemoryProductRepository()


class TestCreateProduct:

    def test_returns_id_and_name(self, repo):
        dto = CreateProductHandler(repo).handle("Widget")
        assert dto == ProductDTO(id=1, name="Widget")

    def test_persists_product(self, repo):
        dto = CreateProductHandler(repo).handle("Widget")
        assert repo.get_by_id(dto.id).name == "Widget"

    def test_sequential_ids(self, repo):
        handler = CreateProductHandler(repo)
        dto1 = handler.handle("Widget")
        dto2 = handler.handle("Gadget")
        assert dto2.id == dto1.id + 1

    def test_to_dict_shape(self, repo):
        dto = CreateProductHandler(repo).handle("Widget")
        assert dto.to_dict() == {"id": 1, "name": "Widget"}


class TestShowAndList:

    def test_show(self, repo):
        CreateProductHandler(repo).handle("Widget")
        assert ShowProductHandler(repo).handle(1) == ProductDTO(id=1, name="Widget")

    def test_show_unknown(self, repo):
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(repo).handle(1)

    def test_list(self, repo):
        create = CreateProductHandler(repo)
        create.handle("Widget")
        create.handle("Gadget")
        assert ListProductsHandler(repo).handle() == [
            ProductDTO(id=1, name="Widget"),
            ProductDTO(id=2, name="Gadget"),
        ]


class TestUpdateProduct:

    def test_rename(self, repo):
        CreateProductHandler(repo).handle("Widget")
        dto = UpdateProductHandler(repo).handle(1, "Sprocket")
        assert dto == ProductDTO(id=1, name="Sprocket")
        assert ShowProductHandler(repo).handle(1).name == "Sprocket"

    def test_rename_unknown(self, repo):
        with pytest.raises(EntityNotFoundError):
            UpdateProductHandler(repo).handle(1, "Sprocket")


class TestDeleteProduct:

    def test_delete_then_show(self, repo):
        CreateProductHandler(repo).handle("Widget")
        DeleteProductHandler(repo).handle(1)
        with pytest.raises(EntityNotFoundError):
            ShowProductHandler(repo).handle(1)

    def test_recreate_same_name_gets_new_id(self, repo):
        create = CreateProductHandler(repo)
        create.handle("Widget")
        DeleteProductHandler(repo).handle(1)
        assert create.handle("Widget").id == 2

    def test_delete_unknown(self, repo):
        with pytest.raises(EntityNotFoundError):
            DeleteProductHandler(repo).handle(1)


class TestStorageFailures:

    @pytest.mark.parametrize(
        "call",
        [
            lambda r: CreateProductHandler(r).handle("Widget"),
            lambda r: ShowProductHandler(r).handle(1),
            lambda r: ListProductsHandler(r).handle(),
            lambda r: UpdateProductHandler(r).handle(1, "Sprocket"),
            lambda r: DeleteProductHandler(r).handle(1),
        ],
    )
    def test_errors_propagate(self, call):
        repo = UnavailableProductRepository()
        with pytest.raises(StorageUnavailableError):
            call(repo)
        # Exactly one attempt: no retries.
        assert len(repo.calls) == 1
