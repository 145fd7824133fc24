"""CLI commands for shops."""

from __future__ import annotations

import click

from storefront.infrastructure.bootstrap import shop_repository


@click.command("list")
def shop_list() -> None:
    """List all shops."""
    shops = shop_repository().list_all()

    if not shops:
        click.echo("No shops found.")
        return

    click.echo(f"{'ID':<12} {'Name':<30}")
    click.echo("-" * 43)
    for s in shops:
        click.echo(f"{s.id:<12} {s.name:<30}")
