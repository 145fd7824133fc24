"""Abstract repository for Shop entities.

Defined in the domain layer so the domain never depends on
infrastructure. The order summary only needs point lookups by id.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from storefront.domain.model.shop import Shop


class ShopRepository(ABC):

    @abstractmethod
    def get_by_id(self, shop_id: str) -> Shop | None:
        """Return a shop by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Shop]:
        """Return every shop."""

    @abstractmethod
    def save(self, shop: Shop) -> None:
        """Persist a new or updated shop."""
