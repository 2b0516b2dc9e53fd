"""Composition root: wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from bazaar.domain.model.market_config import MarketConfig
from bazaar.infrastructure.adapters import (
    JsonPaymentGateway,
    LoggingNotificationPublisher,
    SystemClock,
)
from bazaar.infrastructure.config import load_config
from bazaar.infrastructure.persistence.json_approval_repository import (
    JsonApprovalRepository,
)
from bazaar.infrastructure.persistence.json_discount_repository import (
    JsonDiscountRepository,
)
from bazaar.infrastructure.persistence.json_order_repository import (
    JsonOrderRepository,
)
from bazaar.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def market_config(data_dir: Path) -> MarketConfig:
    return load_config(data_dir / "config.json")


def product_repository(data_dir: Path) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")


def discount_repository(data_dir: Path) -> JsonDiscountRepository:
    return JsonDiscountRepository(data_dir / "discounts.json")


def order_repository(data_dir: Path) -> JsonOrderRepository:
    return JsonOrderRepository(data_dir / "orders.json")


def approval_repository(data_dir: Path) -> JsonApprovalRepository:
    return JsonApprovalRepository(data_dir / "approvals.json")


def clock() -> SystemClock:
    return SystemClock()


def payment_gateway(data_dir: Path) -> JsonPaymentGateway:
    return JsonPaymentGateway(data_dir / "transfers.json", clock())


def notification_publisher() -> LoggingNotificationPublisher:
    return LoggingNotificationPublisher()
