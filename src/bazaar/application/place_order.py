"""Application service: Place Order use case.

Prices a multi-line order, settles the payment and creates the Order.
This is the only place that coordinates the catalog, the discount
engine, the payment gateway and the approval gate.

The operation is all-or-nothing.  It runs in three phases:
  Phase 1 - validate and price: every check that can fail runs here,
            before anything is written.  A product id that was never
            listed fails with InsufficientResource whatever the line
            quantity, rather than being priced as an empty zero-stock
            record.
  Phase 2 - settle: refund any overpayment.  A rejected transfer aborts
            the call with nothing written.
  Phase 3 - commit: save the order (consuming an order id), open the
            approval record for high-value orders and emit OrderCreated.
"""

from __future__ import annotations

from collections.abc import Sequence
from decimal import Decimal

import structlog

from bazaar.domain.events import OrderCreated
from bazaar.domain.exceptions import InsufficientResource, InvalidInput, TransferFailed
from bazaar.domain.model.approval import ApprovalRecord
from bazaar.domain.model.market_config import MarketConfig
from bazaar.domain.model.order import Order, ShippingOption, shipping_cost
from bazaar.domain.model.value_objects import Money, Quantity
from bazaar.domain.ports import Clock, NotificationPublisher, PaymentGateway
from bazaar.domain.repository.approval_repository import ApprovalRepository
from bazaar.domain.repository.discount_repository import DiscountRepository
from bazaar.domain.repository.order_repository import OrderRepository
from bazaar.domain.repository.product_repository import ProductRepository
from bazaar.domain.service.pricing import DiscountPricingService

logger = structlog.get_logger(__name__)


class PlaceOrderHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        discount_repo: DiscountRepository,
        order_repo: OrderRepository,
        approval_repo: ApprovalRepository,
        payments: PaymentGateway,
        clock: Clock,
        publisher: NotificationPublisher,
        config: MarketConfig,
    ) -> None:
        self._product_repo = product_repo
        self._pricing = DiscountPricingService(discount_repo)
        self._order_repo = order_repo
        self._approval_repo = approval_repo
        self._payments = payments
        self._clock = clock
        self._publisher = publisher
        self._config = config

    def handle(
        self,
        product_ids: Sequence[int],
        quantities: Sequence[int],
        shipping_option: ShippingOption | str,
        shipping_address: str,
        payment: str | int | Decimal,
        buyer: str,
    ) -> int:
        """Place an order for ``buyer`` and return its id."""
        now = self._clock.now()

        # Phase 1: validate and price
        if len(product_ids) != len(quantities):
            raise InvalidInput(
                f"Got {len(product_ids)} product ids but {len(quantities)} quantities"
            )
        option = self._parse_shipping(shipping_option)
        paid = Money.of(payment)

        total = Money.zero()
        for product_id, raw_qty in zip(product_ids, quantities):
            qty = Quantity(raw_qty)
            product = self._product_repo.get_by_id(product_id)
            # Unlisted ids are refused outright, even for zero-quantity lines.
            if product is None:
                raise InsufficientResource(f"Product #{product_id} is not listed")
            # Stock is checked, not reserved.
            if product.available_quantity.value < qty.value:
                raise InsufficientResource(
                    f"Insufficient stock for {product.name} "
                    f"(need {qty}, have {product.available_quantity} available)"
                )
            unit_price = self._pricing.price_after_discount(
                product_id, product.unit_price, now
            )
            total = total + unit_price * qty.value

        shipping = shipping_cost(option)
        if paid < total + shipping:
            raise InsufficientResource(
                f"Insufficient funds: paid {paid}, order costs {total} plus {shipping} shipping"
            )
        refund = paid - total - shipping

        # Phase 2: settle
        if not refund.is_zero and not self._payments.transfer(buyer, refund):
            raise TransferFailed(f"Refund of {refund} to '{buyer}' was rejected")

        # Phase 3: commit
        order = Order.place(
            buyer=buyer,
            total_amount=total,
            shipping_option=option,
            shipping_address=shipping_address,
            placed_at=now,
        )
        self._order_repo.save(order)

        high_value = order.is_high_value(self._config.high_value_threshold)
        if high_value:
            self._approval_repo.save(ApprovalRecord.open(order.id))  # type: ignore[arg-type]

        self._publisher.publish(
            OrderCreated(
                order_id=order.id,  # type: ignore[arg-type]
                buyer=buyer,
                total_amount=str(total.amount),
                shipping_option=option.value,
            )
        )
        logger.info(
            "Order placed",
            order_id=order.id,
            buyer=buyer,
            total=str(total.amount),
            refund=str(refund.amount),
            requires_approval=high_value,
        )
        return order.id  # type: ignore[return-value]

    @staticmethod
    def _parse_shipping(option: ShippingOption | str) -> ShippingOption:
        if isinstance(option, ShippingOption):
            return option
        try:
            return ShippingOption(option.upper())
        except ValueError as exc:
            raise InvalidInput(f"Unknown shipping option: {option!r}") from exc
