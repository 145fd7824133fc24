"""JSON-file-backed implementation of ShopRepository."""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.shop import Shop
from storefront.domain.repository.shop_repository import ShopRepository


class JsonShopRepository(ShopRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ShopRepository interface ---------------------------------------------

    def get_by_id(self, shop_id: str) -> Shop | None:
        return self._load().get(shop_id)

    def list_all(self) -> list[Shop]:
        return list(self._load().values())

    def save(self, shop: Shop) -> None:
        shops = self._load()
        shops[shop.id] = shop
        self._persist(shops)

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Shop]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return {item["_id"]: Shop(id=item["_id"], name=item["name"]) for item in raw}

    def _persist(self, shops: dict[str, Shop]) -> None:
        raw = [{"_id": s.id, "name": s.name} for s in shops.values()]
        self._file_path.write_text(
            json.dumps(raw, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
