import logging

import click

from storefront.infrastructure.cli.order_commands import (
    order_payments,
    order_shops,
    order_totals,
)
from storefront.infrastructure.cli.product_commands import product_grid
from storefront.infrastructure.cli.shop_commands import shop_list


@click.group()
@click.option(
    "--log-level",
    default="WARNING",
    show_default=True,
    type=click.Choice(["DEBUG", "INFO", "WARNING", "ERROR"], case_sensitive=False),
    help="Logging verbosity.",
)
def cli(log_level: str) -> None:
    """Storefront — order totals and catalog tools"""
    logging.basicConfig(
        level=log_level.upper(),
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def order() -> None:
    """Inspect orders."""


@cli.group()
def product() -> None:
    """Inspect the product catalog."""


@cli.group()
def shop() -> None:
    """Inspect shops."""


# Register subcommands
order.add_command(order_payments)
order.add_command(order_shops)
order.add_command(order_totals)
product.add_command(product_grid)
shop.add_command(shop_list)
