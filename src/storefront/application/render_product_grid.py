"""Application service: Render Product Grid use case.

Builds the per-product controls for the catalog grid.  Selection and
pending-change state come from the caller (the grid keeps them in the
browser session); permission is a single capability check.
"""

from __future__ import annotations

from typing import Callable, Collection

from storefront.application.dto import ProductGridRowDTO
from storefront.domain.model.product import Product
from storefront.domain.repository.product_repository import ProductRepository
from storefront.ui.grid_item_controls import GridItemControls


class RenderProductGridHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        checked_ids: Collection[str],
        changed_ids: Collection[str],
        has_create_product_permission: Callable[[], bool],
    ) -> list[ProductGridRowDTO]:
        rows = []
        for product in self._product_repo.list_all():
            controls = self._controls_for(
                product, checked_ids, changed_ids, has_create_product_permission
            )
            rows.append(
                ProductGridRowDTO(
                    product_id=product.id,
                    title=product.title,
                    controls=controls.render(),
                )
            )
        return rows

    @staticmethod
    def _controls_for(
        product: Product,
        checked_ids: Collection[str],
        changed_ids: Collection[str],
        has_create_product_permission: Callable[[], bool],
    ) -> GridItemControls:
        return GridItemControls(
            product=product,
            checked=lambda: product.id in checked_ids,
            has_changes=lambda: product.id in changed_ids,
            has_create_product_permission=has_create_product_permission,
        )
