"""Application service: effective price lookup (read-only).

Runs the catalog price through the discount engine at the current
instant, exactly as order placement would.
"""

from __future__ import annotations

from bazaar.domain.exceptions import EntityNotFoundError
from bazaar.domain.model.value_objects import Money
from bazaar.domain.ports import Clock
from bazaar.domain.repository.discount_repository import DiscountRepository
from bazaar.domain.repository.product_repository import ProductRepository
from bazaar.domain.service.pricing import DiscountPricingService


class EffectivePriceHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
        clock: Clock,
    ) -> None:
        self._product_repo = product_repo
        self._pricing = DiscountPricingService(discount_repo)
        self._clock = clock

    def handle(self, product_id: int) -> Money:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return self._pricing.price_after_discount(
            product_id, product.unit_price, self._clock.now()
        )
