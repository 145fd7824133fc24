"""Domain service: per-shop order summary.

A marketplace order mixes items from several shops.  The summary groups
them per shop and pairs each group with the shop's name, subtotal,
invoiced taxes and shipping.  Shop names live outside the order, so
the service takes a ShopRepository rather than reaching for a global
collection.
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal

from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import LineItem, Order, line_quantity
from storefront.domain.model.summation import sum_field
from storefront.domain.repository.shop_repository import ShopRepository

logger = logging.getLogger(__name__)


@dataclass(frozen=True)
class ShopSummary:
    shop_id: str
    name: str
    sub_total: str
    taxes: str | None
    items: list[LineItem]
    quantity_total: Decimal
    shipping: Decimal | None


class OrderSummaryService:

    def __init__(self, shop_repo: ShopRepository) -> None:
        self._shop_repo = shop_repo

    def get_shop_summary(self, order: Order) -> list[ShopSummary]:
        """Summarise *order* per shop, sorted by shop name.

        Shops with no billing entry yet (checkout not finished) get
        ``None`` for taxes and shipping.  Every shop referenced by a line
        item must exist; a missing one raises EntityNotFoundError.
        """
        taxes_by_shop = order.order_taxes_by_shop()
        sub_totals_by_shop = order.order_sub_total_by_shop()
        shipping_by_shop = order.order_shipping_by_shop()

        summaries: list[ShopSummary] = []
        for shop_id, items in order.items_by_shop().items():
            summaries.append(
                ShopSummary(
                    shop_id=shop_id,
                    name=self._shop_name(shop_id),
                    sub_total=sub_totals_by_shop[shop_id],
                    taxes=taxes_by_shop.get(shop_id),
                    items=items,
                    quantity_total=sum_field(items, line_quantity).or_zero(),
                    shipping=shipping_by_shop.get(shop_id),
                )
            )

        # sorted() is stable: shops sharing a name keep first-seen order
        return sorted(summaries, key=lambda summary: summary.name)

    def _shop_name(self, shop_id: str) -> str:
        logger.info("Looking up shop %s for order summary", shop_id)
        shop = self._shop_repo.get_by_id(shop_id)
        if shop is None:
            raise EntityNotFoundError(f"Shop '{shop_id}' not found")
        return shop.name
