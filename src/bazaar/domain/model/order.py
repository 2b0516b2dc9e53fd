"""Order aggregate.

An order is priced once, when it is placed, and its total never changes
afterwards.  The only state transition is unfulfilled -> fulfilled.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from datetime import datetime, timezone
from decimal import Decimal
from enum import Enum

from bazaar.domain.exceptions import AlreadyDone
from bazaar.domain.model.value_objects import Money


class ShippingOption(Enum):
    STANDARD = "STANDARD"
    EXPRESS = "EXPRESS"
    OVERNIGHT = "OVERNIGHT"


# ---------------------------------------------------------------------------
# Shipping is charged on top of the order total and never included in it.
# ---------------------------------------------------------------------------
SHIPPING_RATES = {
    ShippingOption.STANDARD: Money(Decimal("0.01")),
    ShippingOption.EXPRESS: Money(Decimal("0.02")),
    ShippingOption.OVERNIGHT: Money(Decimal("0.05")),
}


def shipping_cost(option: ShippingOption) -> Money:
    return SHIPPING_RATES[option]


@dataclass
class Order:
    """Aggregate root for buyer orders.

    Use ``Order.place()`` for new orders.  The ``__init__`` is kept plain
    so the repository can reconstitute persisted orders.
    """

    id: int | None
    buyer: str
    total_amount: Money
    shipping_option: ShippingOption
    shipping_address: str = ""
    fulfilled: bool = False
    created_at: datetime = field(default_factory=lambda: datetime.now(timezone.utc))

    @staticmethod
    def place(
        buyer: str,
        total_amount: Money,
        shipping_option: ShippingOption,
        shipping_address: str,
        placed_at: datetime,
    ) -> Order:
        return Order(
            id=None,
            buyer=buyer,
            total_amount=total_amount,
            shipping_option=shipping_option,
            shipping_address=shipping_address,
            created_at=placed_at,
        )

    def is_high_value(self, threshold: Money) -> bool:
        return self.total_amount >= threshold

    def ensure_fulfillable(self) -> None:
        if self.fulfilled:
            raise AlreadyDone(f"Order #{self.id} already fulfilled")

    def fulfill(self) -> None:
        """Transition unfulfilled -> fulfilled. Allowed exactly once."""
        self.ensure_fulfillable()
        self.fulfilled = True
