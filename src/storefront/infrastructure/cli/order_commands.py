"""CLI commands for the Order aggregate."""

from __future__ import annotations

import click

from storefront.application.dto import OrderTotalsDTO
from storefront.application.show_order_totals import ShowOrderTotalsHandler
from storefront.application.show_payment_methods import ShowPaymentMethodsHandler
from storefront.application.show_shop_summary import ShowShopSummaryHandler
from storefront.domain.exceptions import DomainException
from storefront.infrastructure.bootstrap import order_repository, shop_repository


def _display_totals(dto: OrderTotalsDTO) -> None:
    """Shared formatting for an order's totals."""
    click.echo(f"Order #{dto.id}  ({dto.count} items)")
    click.echo()
    click.echo(f"  {'Subtotal':<20} {dto.sub_total:>12}")
    click.echo(f"  {'Shipping':<20} {dto.shipping:>12}")
    click.echo(f"  {'Taxes':<20} {dto.taxes:>12}")
    click.echo(f"  {'Discounts':<20} {'-' + dto.discounts:>12}")
    click.echo(f"  {'-'*33}")
    click.echo(f"  {'Order Total':<20} {dto.total:>12}")

    if dto.sub_total_by_shop:
        click.echo()
        click.echo(f"  {'Shop':<12} {'Subtotal':>10} {'Shipping':>10} {'Taxes':>10}")
        click.echo(f"  {'-'*45}")
        for shop_id, sub_total in dto.sub_total_by_shop.items():
            shipping = dto.shipping_by_shop.get(shop_id, "-")
            taxes = dto.taxes_by_shop.get(shop_id, "-")
            click.echo(f"  {shop_id:<12} {sub_total:>10} {shipping:>10} {taxes:>10}")


@click.command("totals")
@click.option("--id", "order_id", required=True, help="Order ID to display.")
def order_totals(order_id: str) -> None:
    """Show subtotal, shipping, taxes and total of an order."""
    handler = ShowOrderTotalsHandler(order_repo=order_repository())

    try:
        dto = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    _display_totals(dto)


@click.command("shops")
@click.option("--id", "order_id", required=True, help="Order ID to summarise.")
def order_shops(order_id: str) -> None:
    """Show an order broken down by shop, sorted by shop name."""
    handler = ShowShopSummaryHandler(
        order_repo=order_repository(),
        shop_repo=shop_repository(),
    )

    try:
        summaries = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not summaries:
        click.echo("Order has no items.")
        return

    for summary in summaries:
        click.echo(f"{summary.name}  ({summary.quantity_total} items)")
        for item in summary.items:
            click.echo(f"  {item.title:<30} x{item.quantity}")
        click.echo(
            f"  subtotal {summary.sub_total}  shipping {summary.shipping}"
            f"  taxes {summary.taxes}"
        )
        click.echo()


@click.command("payments")
@click.option("--id", "order_id", required=True, help="Order ID.")
def order_payments(order_id: str) -> None:
    """List the payment methods used on an order."""
    handler = ShowPaymentMethodsHandler(order_repo=order_repository())

    try:
        methods = handler.handle(order_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not methods:
        click.echo("No payments recorded.")
        return

    click.echo(f"{'Processor':<14} {'Method':<10} {'Mode':<10} {'Amount':>10}  Transaction")
    click.echo("-" * 64)
    for m in methods:
        click.echo(
            f"{m.processor:<14} {m.method:<10} {m.mode:<10} {m.amount:>10}  {m.transaction_id}"
        )
