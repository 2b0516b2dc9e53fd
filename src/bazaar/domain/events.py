"""Notifications emitted after an operation commits.

They are consumed by outside monitoring only; nothing in the ledger
reacts to them.  An aborted operation emits nothing.
"""

from __future__ import annotations

from dataclasses import asdict, dataclass
from datetime import datetime


@dataclass(frozen=True)
class DomainEvent:

    @property
    def event_type(self) -> str:
        return type(self).__name__

    def payload(self) -> dict:
        return {key: _plain(value) for key, value in asdict(self).items()}


@dataclass(frozen=True)
class ProductCreated(DomainEvent):
    product_id: int
    name: str
    unit_price: str
    available_quantity: int
    vendor: str


@dataclass(frozen=True)
class DiscountCreated(DomainEvent):
    discount_id: int
    product_id: int
    kind: str
    value: str
    valid_until: datetime


@dataclass(frozen=True)
class OrderCreated(DomainEvent):
    order_id: int
    buyer: str
    total_amount: str
    shipping_option: str


@dataclass(frozen=True)
class OrderApproved(DomainEvent):
    order_id: int
    approver: str
    approvals_count: int


@dataclass(frozen=True)
class OrderFulfilled(DomainEvent):
    order_id: int


def _plain(value):
    if isinstance(value, datetime):
        return value.isoformat()
    return value
