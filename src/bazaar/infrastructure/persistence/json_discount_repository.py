"""JSON-file-backed implementation of DiscountRepository."""

from __future__ import annotations

import json
from datetime import datetime
from decimal import Decimal
from pathlib import Path

from bazaar.domain.model.discount import Discount, DiscountKind
from bazaar.domain.model.value_objects import Money
from bazaar.domain.repository.discount_repository import DiscountRepository


class JsonDiscountRepository(DiscountRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- DiscountRepository interface -----------------------------------------

    def next_id(self) -> int:
        return max((d["id"] for d in self._load_raw()), default=0) + 1

    def get_by_id(self, discount_id: int) -> Discount | None:
        for raw in self._load_raw():
            if raw["id"] == discount_id:
                return self._to_domain(raw)
        return None

    def add(self, discount: Discount) -> Discount:
        discounts = self._load_raw()
        stored = discount.with_id(max((d["id"] for d in discounts), default=0) + 1)
        discounts.append(self._to_raw(stored))
        self._persist_raw(discounts)
        return stored

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(discount: Discount) -> dict:
        return {
            "id": discount.id,
            "product_id": discount.product_id,
            "kind": discount.kind.value,
            "value": discount.value_text,
            "valid_until": discount.valid_until.isoformat(),
        }

    @staticmethod
    def _to_domain(raw: dict) -> Discount:
        kind = DiscountKind(raw["kind"])
        if kind is DiscountKind.FLAT:
            value: Money | int = Money(Decimal(raw["value"]))
        else:
            value = int(raw["value"])
        return Discount(
            id=raw["id"],
            product_id=raw["product_id"],
            kind=kind,
            value=value,
            valid_until=datetime.fromisoformat(raw["valid_until"]),
        )

    # --- File helpers ---------------------------------------------------------

    def _load_raw(self) -> list[dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _persist_raw(self, discounts: list[dict]) -> None:
        self._file_path.write_text(
            json.dumps(discounts, indent=2) + "\n", encoding="utf-8"
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")
