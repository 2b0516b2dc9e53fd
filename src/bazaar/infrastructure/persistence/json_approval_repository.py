"""JSON-file-backed implementation of ApprovalRepository."""

from __future__ import annotations

import json
from pathlib import Path

from bazaar.domain.model.approval import ApprovalRecord
from bazaar.domain.repository.approval_repository import ApprovalRepository


class JsonApprovalRepository(ApprovalRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    def get_by_order_id(self, order_id: int) -> ApprovalRecord | None:
        raw = self._load_raw().get(str(order_id))
        if raw is None:
            return None
        return ApprovalRecord(
            order_id=order_id,
            approvals_count=raw["approvals_count"],
            approved_by=set(raw["approved_by"]),
            cleared=raw["cleared"],
        )

    def save(self, record: ApprovalRecord) -> None:
        records = self._load_raw()
        # JSON object keys are strings
        records[str(record.order_id)] = {
            "approvals_count": record.approvals_count,
            "approved_by": sorted(record.approved_by),
            "cleared": record.cleared,
        }
        self._file_path.write_text(
            json.dumps(records, indent=2) + "\n", encoding="utf-8"
        )

    def _load_raw(self) -> dict[str, dict]:
        return json.loads(self._file_path.read_text(encoding="utf-8"))

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("{}", encoding="utf-8")
