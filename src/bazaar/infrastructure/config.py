"""Loads the fixed marketplace configuration from ``config.json``.

The file is created with defaults on first use, the same way the JSON
repositories create their data files.
"""

from __future__ import annotations

import json
from pathlib import Path

from bazaar.domain.exceptions import InvalidInput
from bazaar.domain.model.market_config import MarketConfig
from bazaar.domain.model.value_objects import Money

DEFAULT_CONFIG = {
    "owner": "owner",
    "approvers": ["approver-1", "approver-2", "approver-3"],
    "high_value_threshold": "100.00",
}


def load_config(file_path: Path) -> MarketConfig:
    if not file_path.exists():
        file_path.parent.mkdir(parents=True, exist_ok=True)
        file_path.write_text(json.dumps(DEFAULT_CONFIG, indent=2) + "\n", encoding="utf-8")

    raw = json.loads(file_path.read_text(encoding="utf-8"))
    try:
        return MarketConfig(
            owner=raw["owner"],
            approvers=tuple(raw["approvers"]),
            high_value_threshold=Money.of(raw["high_value_threshold"]),
        )
    except KeyError as exc:
        raise InvalidInput(f"{file_path} is missing the {exc.args[0]!r} setting") from exc
