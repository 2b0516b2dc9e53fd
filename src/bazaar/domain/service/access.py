"""Capability guards run at the top of every restricted operation."""

from __future__ import annotations

from bazaar.domain.exceptions import Unauthorized
from bazaar.domain.model.market_config import MarketConfig
from bazaar.domain.model.product import Product


def require_vendor(product: Product | None, caller: str) -> None:
    # A product id that was never created has no vendor anyone can match.
    if product is None or product.vendor != caller:
        raise Unauthorized(f"'{caller}' is not the vendor of this product")


def require_approver(config: MarketConfig, caller: str) -> None:
    if not config.is_approver(caller):
        raise Unauthorized(f"'{caller}' is not an approver")
