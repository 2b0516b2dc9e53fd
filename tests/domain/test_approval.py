"""Unit tests for the ApprovalRecord aggregate and MarketConfig quorum."""

import pytest

from bazaar.domain.exceptions import AlreadyDone
from bazaar.domain.model.approval import ApprovalRecord, ApprovalState
from bazaar.domain.model.market_config import MarketConfig
from bazaar.domain.model.value_objects import Money


def _config(*approvers: str) -> MarketConfig:
    return MarketConfig(owner="owner", approvers=approvers, high_value_threshold=Money.of("100"))


class TestApprovalRecord:

    def test_opens_pending_with_zero(self):
        record = ApprovalRecord.open(7)
        assert record.approvals_count == 0
        assert record.approved_by == set()
        assert record.state == ApprovalState.PENDING_APPROVAL

    def test_record_counts_and_remembers(self):
        record = ApprovalRecord.open(7)
        record.record("ann")
        record.record("ben")
        assert record.approvals_count == 2
        assert record.approved_by == {"ann", "ben"}

    def test_same_approver_twice_rejected(self):
        record = ApprovalRecord.open(7)
        record.record("ann")
        with pytest.raises(AlreadyDone, match="already approved"):
            record.record("ann")
        assert record.approvals_count == 1

    def test_count_after_does_not_mutate(self):
        record = ApprovalRecord.open(7)
        assert record.count_after("ann") == 1
        assert record.approvals_count == 0

    def test_clear(self):
        record = ApprovalRecord.open(7)
        record.clear()
        assert record.state == ApprovalState.CLEARED


class TestQuorum:

    @pytest.mark.parametrize(
        "approvers, quorum",
        [
            (("a",), 0),
            (("a", "b"), 1),
            (("a", "b", "c"), 1),
            (("a", "b", "c", "d"), 2),
            (("a", "b", "c", "d", "e"), 2),
        ],
    )
    def test_half_rounded_down(self, approvers, quorum):
        assert _config(*approvers).quorum == quorum

    def test_duplicates_count_toward_list_size(self):
        config = _config("a", "a", "b", "c")
        assert config.quorum == 2
        assert config.is_approver("a")

    def test_membership(self):
        config = _config("a", "b")
        assert config.is_approver("b")
        assert not config.is_approver("z")
