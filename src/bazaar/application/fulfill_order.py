"""Application service: Fulfill Order use case.

Any caller may fulfill any unfulfilled order, whether or not a
high-value order has cleared its approval gate.  The approval gate
also calls this handler once quorum is reached.
"""

from __future__ import annotations

import structlog

from bazaar.domain.events import OrderFulfilled
from bazaar.domain.exceptions import AlreadyDone
from bazaar.domain.model.order import Order
from bazaar.domain.ports import NotificationPublisher
from bazaar.domain.repository.order_repository import OrderRepository

logger = structlog.get_logger(__name__)


class FulfillOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        publisher: NotificationPublisher,
    ) -> None:
        self._order_repo = order_repo
        self._publisher = publisher

    def check(self, order_id: int) -> Order:
        """Return the order if it can be fulfilled, else raise AlreadyDone."""
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise AlreadyDone(f"Order #{order_id} is not an open order")
        order.ensure_fulfillable()
        return order

    def handle(self, order_id: int) -> None:
        order = self.check(order_id)
        order.fulfill()
        self._order_repo.save(order)

        self._publisher.publish(OrderFulfilled(order_id=order_id))
        logger.info("Order fulfilled", order_id=order_id)
