"""Application service: Show Order Totals use case (query)."""

from __future__ import annotations

from storefront.application.dto import OrderTotalsDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import Order
from storefront.domain.model.value_objects import to_fixed
from storefront.domain.repository.order_repository import OrderRepository


class ShowOrderTotalsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> OrderTotalsDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self._to_dto(order)

    @staticmethod
    def _to_dto(order: Order) -> OrderTotalsDTO:
        return OrderTotalsDTO(
            id=order.id,  # type: ignore[arg-type]
            count=order.order_count(),
            sub_total=order.order_sub_total(),
            shipping=order.order_shipping(),
            taxes=order.order_taxes(),
            discounts=order.order_discounts(),
            total=order.order_total(),
            sub_total_by_shop=order.order_sub_total_by_shop(),
            shipping_by_shop={
                shop_id: to_fixed(amount)
                for shop_id, amount in order.order_shipping_by_shop().items()
            },
            taxes_by_shop=order.order_taxes_by_shop(),
        )
