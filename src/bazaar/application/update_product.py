"""Application service: Update Product use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from bazaar.domain.model.value_objects import Money, Quantity
from bazaar.domain.repository.product_repository import ProductRepository
from bazaar.domain.service.access import require_vendor

logger = structlog.get_logger(__name__)


class UpdateProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        product_id: int,
        name: str,
        price: str | int | Decimal,
        quantity: int,
        caller: str,
    ) -> None:
        """Replace a product record wholesale.

        Only the product's vendor may do this.  Existing orders keep the
        total they were placed with.
        """
        product = self._product_repo.get_by_id(product_id)
        require_vendor(product, caller)

        product.replace(  # type: ignore[union-attr]
            name=name,
            unit_price=Money.of(price),
            quantity=Quantity(quantity),
            vendor=caller,
        )
        self._product_repo.save(product)  # type: ignore[arg-type]
        logger.info("Product replaced", product_id=product_id, vendor=caller)
