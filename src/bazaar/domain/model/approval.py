"""ApprovalRecord aggregate: the quorum gate in front of high-value orders.

A record exists only for orders whose total met the high-value threshold
when they were placed.  Each approver identity counts at most once.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from bazaar.domain.exceptions import AlreadyDone


class ApprovalState(Enum):
    NO_GATE_NEEDED = "NO_GATE_NEEDED"
    PENDING_APPROVAL = "PENDING_APPROVAL"
    CLEARED = "CLEARED"


@dataclass
class ApprovalRecord:
    """Invariants:
    - ``approvals_count`` only ever increases
    - ``approvals_count == len(approved_by)``
    """

    order_id: int
    approvals_count: int = 0
    approved_by: set[str] = field(default_factory=set)
    cleared: bool = False

    @staticmethod
    def open(order_id: int) -> ApprovalRecord:
        return ApprovalRecord(order_id=order_id)

    @property
    def state(self) -> ApprovalState:
        if self.cleared:
            return ApprovalState.CLEARED
        return ApprovalState.PENDING_APPROVAL

    def has_approved(self, approver: str) -> bool:
        return approver in self.approved_by

    def ensure_can_approve(self, approver: str) -> None:
        if self.has_approved(approver):
            raise AlreadyDone(
                f"'{approver}' already approved order #{self.order_id}"
            )

    def count_after(self, approver: str) -> int:
        """Approval count this record would reach if ``approver`` approved now."""
        self.ensure_can_approve(approver)
        return self.approvals_count + 1

    def record(self, approver: str) -> None:
        self.ensure_can_approve(approver)
        self.approvals_count += 1
        self.approved_by.add(approver)

    def clear(self) -> None:
        self.cleared = True
