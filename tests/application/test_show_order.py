"""Integration tests for the ShowOrder view."""

import pytest

from bazaar.domain.exceptions import EntityNotFoundError
from tests.fakes import FakeLedger


def _place(ledger, units):
    pid = ledger.add_product_handler().handle("Lamp", "50", 10, caller="vera")
    return ledger.place_order_handler().handle(
        product_ids=[pid],
        quantities=[units],
        shipping_option="EXPRESS",
        shipping_address="1 Main St",
        payment="500",
        buyer="bob",
    )


class TestShowOrder:

    def test_small_order_needs_no_gate(self):
        ledger = FakeLedger()
        dto = ledger.show_order_handler().handle(_place(ledger, 1))
        assert dto.total == "$50.00"
        assert dto.shipping_cost == "$0.02"
        assert dto.gate_state == "NO_GATE_NEEDED"
        assert dto.fulfilled is False

    def test_high_value_order_pending_then_cleared(self):
        ledger = FakeLedger(approvers=("ann", "ben", "cho", "dee"))
        oid = _place(ledger, 2)
        dto = ledger.show_order_handler().handle(oid)
        assert dto.gate_state == "PENDING_APPROVAL"
        assert (dto.approvals_count, dto.quorum) == (0, 2)

        handler = ledger.approve_order_handler()
        handler.handle(oid, "ann")
        handler.handle(oid, "ben")
        dto = ledger.show_order_handler().handle(oid)
        assert dto.gate_state == "CLEARED"
        assert dto.approvals_count == 2
        assert dto.fulfilled is True

    def test_unknown_order(self):
        with pytest.raises(EntityNotFoundError):
            FakeLedger().show_order_handler().handle(1)
