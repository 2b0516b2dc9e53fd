"""Application service: Approve Order use case (the approval gate).

High-value orders need ``floor(len(approvers) / 2)`` approvals.  The
count is compared *after* the new approval is added, so with three or
fewer approvers the first approval already clears the gate.  Clearing
the gate fulfills the order in the same operation.

If the quorum would be reached but the order was already fulfilled
(e.g. directly, through FulfillOrderHandler), the approval is rejected
with AlreadyDone and nothing is recorded.
"""

from __future__ import annotations

import structlog

from bazaar.application.fulfill_order import FulfillOrderHandler
from bazaar.domain.events import OrderApproved
from bazaar.domain.exceptions import NotEligible
from bazaar.domain.model.approval import ApprovalRecord
from bazaar.domain.model.market_config import MarketConfig
from bazaar.domain.model.value_objects import Money
from bazaar.domain.ports import NotificationPublisher
from bazaar.domain.repository.approval_repository import ApprovalRepository
from bazaar.domain.repository.order_repository import OrderRepository
from bazaar.domain.service.access import require_approver

logger = structlog.get_logger(__name__)


class ApproveOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        approval_repo: ApprovalRepository,
        publisher: NotificationPublisher,
        config: MarketConfig,
    ) -> None:
        self._order_repo = order_repo
        self._approval_repo = approval_repo
        self._publisher = publisher
        self._config = config
        self._fulfillment = FulfillOrderHandler(order_repo, publisher)

    def handle(self, order_id: int, approver: str) -> bool:
        """Record ``approver``'s approval. Return True if it cleared the gate."""
        require_approver(self._config, approver)

        order = self._order_repo.get_by_id(order_id)
        total = order.total_amount if order is not None else Money.zero()
        if total < self._config.high_value_threshold:
            raise NotEligible(
                f"Order #{order_id} total {total} is below the approval threshold "
                f"{self._config.high_value_threshold}"
            )

        record = self._approval_repo.get_by_order_id(order_id)
        if record is None:
            record = ApprovalRecord.open(order_id)

        reaches_quorum = record.count_after(approver) >= self._config.quorum
        if reaches_quorum:
            self._fulfillment.check(order_id)

        record.record(approver)
        if reaches_quorum:
            record.clear()
        self._approval_repo.save(record)
        self._publisher.publish(
            OrderApproved(
                order_id=order_id,
                approver=approver,
                approvals_count=record.approvals_count,
            )
        )
        logger.info(
            "Order approved",
            order_id=order_id,
            approver=approver,
            approvals=record.approvals_count,
            quorum=self._config.quorum,
        )

        if reaches_quorum:
            self._fulfillment.handle(order_id)
        return reaches_quorum
