"""Application service: Show Shop Summary use case (query).

Splits a marketplace order into one block per shop, sorted by shop
name, as shown on the order details page.
"""

from __future__ import annotations

from storefront.application.dto import ShopLineItemDTO, ShopSummaryDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.value_objects import to_fixed
from storefront.domain.repository.order_repository import OrderRepository
from storefront.domain.repository.shop_repository import ShopRepository
from storefront.domain.service.order_summary_service import (
    OrderSummaryService,
    ShopSummary,
)


class ShowShopSummaryHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        shop_repo: ShopRepository,
    ) -> None:
        self._order_repo = order_repo
        self._shop_repo = shop_repo

    def handle(self, order_id: str) -> list[ShopSummaryDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")

        svc = OrderSummaryService(self._shop_repo)
        return [self._to_dto(summary) for summary in svc.get_shop_summary(order)]

    @staticmethod
    def _to_dto(summary: ShopSummary) -> ShopSummaryDTO:
        return ShopSummaryDTO(
            shop_id=summary.shop_id,
            name=summary.name,
            sub_total=summary.sub_total,
            taxes=summary.taxes if summary.taxes is not None else "-",
            shipping=to_fixed(summary.shipping) if summary.shipping is not None else "-",
            quantity_total=summary.quantity_total,
            items=[
                ShopLineItemDTO(
                    title=item.title or (item.variant.title if item.variant else None) or "?",
                    quantity=str(item.quantity) if item.quantity is not None else "?",
                )
                for item in summary.items
            ],
        )
