"""Fail-soft summations over order sub-documents.

Orders can be read back at any point of checkout, including ones that
never got a variant price or a shipment method.  Rather than raising,
a summation over such data comes back *incomplete*; the caller decides
what that means (for every order total it means zero).
"""

from __future__ import annotations

import logging
from dataclasses import dataclass
from decimal import Decimal, InvalidOperation
from typing import Callable, Iterable, Protocol, TypeVar

from storefront.domain.exceptions import IncompleteRecordError
from storefront.domain.model.value_objects import ZERO

logger = logging.getLogger(__name__)


class ShopScoped(Protocol):
    shop_id: str | None


E = TypeVar("E", bound=ShopScoped)
Field = Callable[[E], Decimal]


@dataclass(frozen=True)
class Summation:
    """Result of a summation: a value, or a marker that data was missing."""

    value: Decimal
    complete: bool = True

    @staticmethod
    def incomplete() -> Summation:
        return Summation(ZERO, complete=False)

    def or_zero(self) -> Decimal:
        return self.value if self.complete else ZERO


def _name(field: Callable) -> str:
    return getattr(field, "__name__", repr(field))


def _scoped(entries: Iterable[E], shop_id: str | None) -> Iterable[E]:
    if shop_id is None:
        return entries
    return (entry for entry in entries if entry.shop_id == shop_id)


def sum_field(
    entries: Iterable[E],
    field: Field[E],
    shop_id: str | None = None,
) -> Summation:
    """Sum ``field(entry)`` over *entries*, optionally for one shop only."""
    total = ZERO
    try:
        for entry in _scoped(entries, shop_id):
            total += field(entry)
    except (IncompleteRecordError, TypeError, InvalidOperation) as exc:
        logger.debug("Summation of %s incomplete: %s", _name(field), exc)
        return Summation.incomplete()
    return Summation(total)


def sum_product(
    entries: Iterable[E],
    field_a: Field[E],
    field_b: Field[E],
    shop_id: str | None = None,
) -> Summation:
    """Sum ``field_a(entry) * field_b(entry)`` over *entries*."""
    total = ZERO
    try:
        for entry in _scoped(entries, shop_id):
            total += field_a(entry) * field_b(entry)
    except (IncompleteRecordError, TypeError, InvalidOperation) as exc:
        logger.debug(
            "Summation of %s * %s incomplete: %s",
            _name(field_a),
            _name(field_b),
            exc,
        )
        return Summation.incomplete()
    return Summation(total)
