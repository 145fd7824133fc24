"""CLI commands for the product catalog."""

from __future__ import annotations

import click
from rich.console import Console

from storefront.application.render_product_grid import RenderProductGridHandler
from storefront.infrastructure.bootstrap import product_repository
from storefront.ui.elements import render_html, render_rich


@click.command("grid")
@click.option("--checked", multiple=True, help="ID of a selected product (repeatable).")
@click.option("--changed", multiple=True, help="ID of a product with unpublished changes (repeatable).")
@click.option("--no-permission", is_flag=True, default=False, help="Render as a user who cannot create products.")
@click.option("--html", "as_html", is_flag=True, default=False, help="Print the controls as HTML.")
def product_grid(
    checked: tuple[str, ...],
    changed: tuple[str, ...],
    no_permission: bool,
    as_html: bool,
) -> None:
    """Show the catalog grid with each product's controls."""
    handler = RenderProductGridHandler(product_repo=product_repository())
    rows = handler.handle(
        checked_ids=set(checked),
        changed_ids=set(changed),
        has_create_product_permission=lambda: not no_permission,
    )

    if not rows:
        click.echo("No products found.")
        return

    if as_html:
        for row in rows:
            html = render_html(row.controls) if row.controls is not None else ""
            click.echo(f"<!-- {row.product_id} {row.title} -->")
            click.echo(html)
        return

    console = Console(highlight=False, markup=False)
    for row in rows:
        line = render_rich(row.controls) if row.controls is not None else None
        prefix = f"{row.product_id:<8} {row.title:<30} "
        if line is None:
            console.print(prefix)
        else:
            console.print(prefix, line, sep="")
