"""Product entity, as far as the product grid needs it.

The catalog owns products; the grid only reads the id and the
archived/visible flags.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class Product:
    """A product in the catalog.

    ``is_deleted`` marks an archived product: it stays in the catalog
    (and in old orders) but is hidden from shoppers.
    """

    id: str
    title: str
    is_deleted: bool = False
    is_visible: bool = True
