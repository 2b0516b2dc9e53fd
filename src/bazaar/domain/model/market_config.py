"""Fixed marketplace configuration.

Owner, approver list and high-value threshold are decided when the
marketplace is set up and are read-only afterwards.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from bazaar.domain.model.value_objects import Money


@dataclass(frozen=True)
class MarketConfig:
    owner: str
    approvers: tuple[str, ...]
    high_value_threshold: Money
    _approver_index: frozenset[str] = field(init=False, repr=False, compare=False)

    def __post_init__(self) -> None:
        object.__setattr__(self, "approvers", tuple(self.approvers))
        object.__setattr__(self, "_approver_index", frozenset(self.approvers))

    def is_approver(self, identity: str) -> bool:
        return identity in self._approver_index

    @property
    def quorum(self) -> int:
        """Approvals needed to clear the gate: half the list, rounded down.

        The list length counts duplicate entries.
        """
        return len(self.approvers) // 2
