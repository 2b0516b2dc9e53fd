"""Application service: Add Product use case."""

from __future__ import annotations

from decimal import Decimal

import structlog

from bazaar.domain.events import ProductCreated
from bazaar.domain.model.product import Product
from bazaar.domain.model.value_objects import Money, Quantity
from bazaar.domain.ports import NotificationPublisher
from bazaar.domain.repository.product_repository import ProductRepository

logger = structlog.get_logger(__name__)


class AddProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        publisher: NotificationPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._publisher = publisher

    def handle(
        self,
        name: str,
        price: str | int | Decimal,
        quantity: int,
        caller: str,
    ) -> int:
        """List a new product owned by ``caller``. Zero price and stock are allowed."""
        product = Product.create(
            name=name,
            unit_price=Money.of(price),
            quantity=Quantity(quantity),
            vendor=caller,
        )
        self._product_repo.save(product)

        self._publisher.publish(
            ProductCreated(
                product_id=product.id,  # type: ignore[arg-type]
                name=product.name,
                unit_price=str(product.unit_price.amount),
                available_quantity=product.available_quantity.value,
                vendor=product.vendor,
            )
        )
        logger.info("Product listed", product_id=product.id, vendor=caller)
        return product.id  # type: ignore[return-value]
