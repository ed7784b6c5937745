import logging

import click

from catalog.infrastructure.cli.product_commands import (
    product_create,
    product_delete,
    product_list,
    product_show,
    product_update,
)

LOG_FORMAT = "%(asctime)s [%(levelname)s] %(name)s: %(message)s"


@click.group()
@click.option("-v", "--verbose", is_flag=True, default=False, help="Log to stderr.")
def cli(verbose: bool) -> None:
    """Catalog — Product store"""
    if verbose:
        logging.basicConfig(
            level=logging.DEBUG, format=LOG_FORMAT, datefmt="%Y-%m-%d %H:%M:%S"
        )
        # basicConfig is a no-op once the root logger has handlers.
        logging.getLogger("catalog").setLevel(logging.DEBUG)


@cli.group()
def product() -> None:
    """Manage products."""


# Register subcommands
product.add_command(product_create)
product.add_command(product_delete)
product.add_command(product_list)
product.add_command(product_show)
product.add_command(product_update)
