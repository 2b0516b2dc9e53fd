"""Discount records.

A discount is created once by a product's vendor and never changes.
It stops applying once the current instant is past ``valid_until``.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import datetime
from enum import Enum

from bazaar.domain.exceptions import InvalidInput
from bazaar.domain.model.value_objects import Money


class DiscountKind(Enum):
    FLAT = "FLAT"
    PERCENTAGE = "PERCENTAGE"


@dataclass(frozen=True)
class Discount:
    """An immutable, time-bounded price reduction.

    ``value`` is a Money amount for FLAT discounts and an integer
    percentage for PERCENTAGE discounts.  ``product_id`` records which
    product the vendor created it for; pricing does not use it.
    """

    id: int | None
    product_id: int
    kind: DiscountKind
    value: Money | int
    valid_until: datetime

    def __post_init__(self) -> None:
        if self.kind is DiscountKind.FLAT and not isinstance(self.value, Money):
            raise InvalidInput("A flat discount value must be a money amount")
        if self.kind is DiscountKind.PERCENTAGE and (
            isinstance(self.value, bool) or not isinstance(self.value, int) or self.value < 0
        ):
            raise InvalidInput("A percentage discount value must be a non-negative integer")
        if self.valid_until.tzinfo is None:
            raise InvalidInput("Discount expiry must be timezone-aware")

    def is_active(self, now: datetime) -> bool:
        return now <= self.valid_until

    def with_id(self, discount_id: int) -> Discount:
        return Discount(
            id=discount_id,
            product_id=self.product_id,
            kind=self.kind,
            value=self.value,
            valid_until=self.valid_until,
        )

    @property
    def value_text(self) -> str:
        if isinstance(self.value, Money):
            return str(self.value.amount)
        return str(self.value)
