"""Application service: Show Order use case (read-only)."""

from __future__ import annotations

from bazaar.application.dto import OrderDTO
from bazaar.domain.exceptions import EntityNotFoundError
from bazaar.domain.model.approval import ApprovalState
from bazaar.domain.model.market_config import MarketConfig
from bazaar.domain.model.order import Order, shipping_cost
from bazaar.domain.repository.approval_repository import ApprovalRepository
from bazaar.domain.repository.order_repository import OrderRepository


class ShowOrderHandler:

    def __init__(
        self,
        order_repo: OrderRepository,
        approval_repo: ApprovalRepository,
        config: MarketConfig,
    ) -> None:
        self._order_repo = order_repo
        self._approval_repo = approval_repo
        self._config = config

    def handle(self, order_id: int) -> OrderDTO:
        order = self._order_repo.get_by_id(order_id)
        if order is None:
            raise EntityNotFoundError(f"Order #{order_id} not found")
        return self._to_dto(order)

    def _to_dto(self, order: Order) -> OrderDTO:
        state = ApprovalState.NO_GATE_NEEDED
        approvals = 0
        if order.is_high_value(self._config.high_value_threshold):
            record = self._approval_repo.get_by_order_id(order.id)  # type: ignore[arg-type]
            state = ApprovalState.PENDING_APPROVAL
            if record is not None:
                state = record.state
                approvals = record.approvals_count

        return OrderDTO(
            id=order.id,  # type: ignore[arg-type]
            buyer=order.buyer,
            total=str(order.total_amount),
            shipping_option=order.shipping_option.value,
            shipping_cost=str(shipping_cost(order.shipping_option)),
            shipping_address=order.shipping_address,
            fulfilled=order.fulfilled,
            created_at=order.created_at.strftime("%Y-%m-%d %H:%M UTC"),
            gate_state=state.value,
            approvals_count=approvals,
            quorum=self._config.quorum,
        )
