"""Abstract repository for ApprovalRecord aggregate (keyed by order id)."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bazaar.domain.model.approval import ApprovalRecord


class ApprovalRepository(ABC):

    @abstractmethod
    def get_by_order_id(self, order_id: int) -> ApprovalRecord | None:
        """Return the approval record for an order, or None."""

    @abstractmethod
    def save(self, record: ApprovalRecord) -> None:
        """Persist a new or updated approval record."""
