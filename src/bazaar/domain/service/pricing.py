"""Domain service: discount pricing.

Discounts are stored under their own id counter, but are looked up here
by *product id*.  A product therefore picks up whichever discount happens
to share its number, which is not necessarily the one its vendor created
for it.  This lookup is kept exactly as the ledger has always done it.
"""

from __future__ import annotations

from datetime import datetime

from bazaar.domain.exceptions import ArithmeticFault
from bazaar.domain.model.discount import Discount, DiscountKind
from bazaar.domain.model.value_objects import Money
from bazaar.domain.repository.discount_repository import DiscountRepository


class DiscountPricingService:

    def __init__(self, discount_repo: DiscountRepository) -> None:
        self._discount_repo = discount_repo

    def price_after_discount(
        self, product_id: int, original_price: Money, now: datetime
    ) -> Money:
        discount = self._discount_repo.get_by_id(product_id)
        if discount is None or not discount.is_active(now):
            return original_price
        return apply_discount(discount, original_price)


def apply_discount(discount: Discount, original_price: Money) -> Money:
    """Price after ``discount``.

    Raises ArithmeticFault when a flat discount exceeds the price or a
    percentage exceeds 100; nothing is clamped.
    """
    if discount.kind is DiscountKind.FLAT:
        return original_price - discount.value
    if discount.value > 100:
        raise ArithmeticFault(f"Discount of {discount.value}% exceeds 100%")
    return original_price.percent(100 - discount.value)
