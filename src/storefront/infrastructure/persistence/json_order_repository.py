"""JSON-file-backed implementation of OrderRepository.

Orders are stored as the raw documents checkout writes (camelCase keys,
nested ``items``/``shipping``/``billing``); they are projected into the
domain model on every read.
"""

from __future__ import annotations

import json
from pathlib import Path

from storefront.domain.model.order import Order
from storefront.domain.repository.order_repository import OrderRepository


class JsonOrderRepository(OrderRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- OrderRepository interface --------------------------------------------

    def get_by_id(self, order_id: str) -> Order | None:
        for raw in self._load_raw():
            if str(raw.get("_id")) == str(order_id):
                return Order.from_document(raw)
        return None

    def list_all(self) -> list[Order]:
        return [Order.from_document(raw) for raw in self._load_raw()]

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        raw = json.loads(self._file_path.read_text(encoding="utf-8"))
        return [doc for doc in raw if isinstance(doc, dict)]

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
