"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

import os
from pathlib import Path

from storefront.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from storefront.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from storefront.infrastructure.persistence.json_shop_repository import (
    JsonShopRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
_DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def data_dir() -> Path:
    override = os.environ.get("STOREFRONT_DATA_DIR")
    return Path(override) if override else _DEFAULT_DATA_DIR


def order_repository() -> JsonOrderRepository:
    return JsonOrderRepository(data_dir() / "orders.json")


def shop_repository() -> JsonShopRepository:
    return JsonShopRepository(data_dir() / "shops.json")


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(data_dir() / "products.json")
