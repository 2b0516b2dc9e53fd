"""Application service: Add Discount use case."""

from __future__ import annotations

from datetime import datetime
from decimal import Decimal

import structlog

from bazaar.domain.events import DiscountCreated
from bazaar.domain.exceptions import InvalidInput
from bazaar.domain.model.discount import Discount, DiscountKind
from bazaar.domain.model.value_objects import Money
from bazaar.domain.ports import NotificationPublisher
from bazaar.domain.repository.discount_repository import DiscountRepository
from bazaar.domain.repository.product_repository import ProductRepository
from bazaar.domain.service.access import require_vendor

logger = structlog.get_logger(__name__)


class AddDiscountHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
        publisher: NotificationPublisher,
    ) -> None:
        self._product_repo = product_repo
        self._discount_repo = discount_repo
        self._publisher = publisher

    def handle(
        self,
        product_id: int,
        kind: DiscountKind | str,
        value: str | int | Decimal,
        valid_until: datetime,
        caller: str,
    ) -> int:
        """Create a discount for one of the caller's products.

        The discount gets the next *discount* id, which need not equal
        ``product_id``.
        """
        require_vendor(self._product_repo.get_by_id(product_id), caller)

        kind = self._parse_kind(kind)
        discount = self._discount_repo.add(
            Discount(
                id=None,
                product_id=product_id,
                kind=kind,
                value=self._parse_value(kind, value),
                valid_until=valid_until,
            )
        )

        self._publisher.publish(
            DiscountCreated(
                discount_id=discount.id,  # type: ignore[arg-type]
                product_id=product_id,
                kind=discount.kind.value,
                value=discount.value_text,
                valid_until=discount.valid_until,
            )
        )
        logger.info(
            "Discount created",
            discount_id=discount.id,
            product_id=product_id,
            kind=discount.kind.value,
        )
        return discount.id  # type: ignore[return-value]

    # --- Parsing --------------------------------------------------------------

    @staticmethod
    def _parse_kind(kind: DiscountKind | str) -> DiscountKind:
        if isinstance(kind, DiscountKind):
            return kind
        try:
            return DiscountKind(kind.upper())
        except ValueError as exc:
            raise InvalidInput(f"Unknown discount kind: {kind!r}") from exc

    @staticmethod
    def _parse_value(kind: DiscountKind, value: str | int | Decimal) -> Money | int:
        if kind is DiscountKind.FLAT:
            return Money.of(value)
        try:
            return int(value)
        except (TypeError, ValueError) as exc:
            raise InvalidInput(f"Percentage must be a whole number, got {value!r}") from exc
