"""Application service: Show Payment Methods use case (query)."""

from __future__ import annotations

from storefront.application.dto import PaymentMethodDTO
from storefront.domain.exceptions import EntityNotFoundError
from storefront.domain.model.order import PaymentMethodSummary
from storefront.domain.repository.order_repository import OrderRepository


def _text(value: object) -> str:
    return "" if value is None else str(value)


class ShowPaymentMethodsHandler:

    def __init__(self, order_repo: OrderRepository) -> None:
        self._order_repo = order_repo

    def handle(self, order_id: str) -> list[PaymentMethodDTO]:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return [self._to_dto(method) for method in order.get_payment_methods()]

    @staticmethod
    def _to_dto(method: PaymentMethodSummary) -> PaymentMethodDTO:
        return PaymentMethodDTO(
            processor=_text(method.processor),
            method=_text(method.method),
            mode=_text(method.mode),
            transaction_id=_text(method.transaction_id),
            stored_card=_text(method.stored_card),
            amount=_text(method.amount),
        )
