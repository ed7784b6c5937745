"""CLI commands for the Product entity."""

from __future__ import annotations

import json

import click

from catalog.application.create_product import CreateProductHandler
from catalog.application.delete_product import DeleteProductHandler
from catalog.application.dto import ProductDTO
from catalog.application.list_products import ListProductsHandler
from catalog.application.show_product import ShowProductHandler
from catalog.application.update_product import UpdateProductHandler
from catalog.domain.exceptions import DomainException, EntityNotFoundError
from catalog.infrastructure.bootstrap import product_repository


def _repository():
    try:
        return product_repository()
    except DomainException as exc:
        raise click.ClickException(str(exc))


def _display_name(dto: ProductDTO) -> str:
    return dto.name if dto.name is not None else "-"


@click.command("create")
@click.option("--name", required=True, help="Product name (may be empty).")
def product_create(name: str) -> None:
    """Add a new product."""
    handler = CreateProductHandler(product_repo=_repository())

    try:
        dto = handler.handle(name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} '{_display_name(dto)}' created")


@click.command("show")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON.")
def product_show(product_id: int, as_json: bool) -> None:
    """Show a single product."""
    handler = ShowProductHandler(product_repo=_repository())

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps(dto.to_dict()))
        return
    click.echo(f"Product #{dto.id}")
    click.echo(f"Name: {_display_name(dto)}")


@click.command("list")
@click.option("--json", "as_json", is_flag=True, default=False, help="Print as JSON.")
def product_list(as_json: bool) -> None:
    """List all products."""
    handler = ListProductsHandler(product_repo=_repository())

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if as_json:
        click.echo(json.dumps([p.to_dict() for p in products]))
        return

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<30}")
    click.echo("-" * 37)
    for p in products:
        click.echo(f"{p.id:<6} {_display_name(p):<30}")


@click.command("update")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="New product name.")
def product_update(product_id: int, name: str) -> None:
    """Rename a product."""
    handler = UpdateProductHandler(product_repo=_repository())

    try:
        dto = handler.handle(product_id=product_id, name=name)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id} renamed to '{_display_name(dto)}'")


@click.command("delete")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option(
    "--missing-ok", is_flag=True, default=False,
    help="Succeed even if the product does not exist.",
)
def product_delete(product_id: int, missing_ok: bool) -> None:
    """Delete a product."""
    handler = DeleteProductHandler(product_repo=_repository())

    try:
        handler.handle(product_id)
    except EntityNotFoundError as exc:
        if not missing_ok:
            raise click.ClickException(str(exc))
        click.echo(f"Product #{product_id} already absent.")
        return
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product_id} deleted.")
