"""Integration tests for the PlaceOrder use case (pricing and settlement)."""

from datetime import timedelta

import pytest

from bazaar.domain.exceptions import (
    ArithmeticFault,
    InsufficientResource,
    InvalidInput,
    TransferFailed,
)
from bazaar.domain.model.order import ShippingOption
from bazaar.domain.model.value_objects import Money
from tests.fakes import NOW, FakeLedger

TOMORROW = NOW + timedelta(days=1)


def _setup(price: str = "50", quantity: int = 10) -> tuple[FakeLedger, int]:
    ledger = FakeLedger(approvers=("ann", "ben", "cho"), threshold="100")
    pid = ledger.add_product_handler().handle("Lamp", price, quantity, caller="vera")
    return ledger, pid


def _place(ledger, product_ids, quantities, payment, shipping="STANDARD", buyer="bob"):
    return ledger.place_order_handler().handle(
        product_ids=product_ids,
        quantities=quantities,
        shipping_option=shipping,
        shipping_address="1 Main St",
        payment=payment,
        buyer=buyer,
    )


class TestPricing:

    def test_total_is_sum_of_lines_without_shipping(self):
        ledger, lamp = _setup()
        rug = ledger.add_product_handler().handle("Rug", "7.25", 5, caller="vera")
        oid = _place(ledger, [lamp, rug], [1, 2], "64.51")
        assert ledger.orders.get_by_id(oid).total_amount == Money.of("64.50")

    def test_percentage_discount_scenario(self):
        ledger, pid = _setup(price="50", quantity=10)
        ledger.add_discount_handler().handle(pid, "percentage", 20, TOMORROW, caller="vera")
        oid = _place(ledger, [pid], [2], "80.01")
        order = ledger.orders.get_by_id(oid)
        assert order.total_amount == Money.of("80")
        assert ledger.approvals.get_by_order_id(oid) is None

    def test_expired_discount_not_applied(self):
        ledger, pid = _setup()
        ledger.add_discount_handler().handle(pid, "flat", "10", NOW - timedelta(days=1), caller="vera")
        oid = _place(ledger, [pid], [1], "50.01")
        assert ledger.orders.get_by_id(oid).total_amount == Money.of("50")

    def test_total_fixed_at_creation(self):
        ledger, pid = _setup()
        oid = _place(ledger, [pid], [1], "50.01")
        ledger.update_product_handler().handle(pid, "Lamp", "999", 10, caller="vera")
        assert ledger.orders.get_by_id(oid).total_amount == Money.of("50")

    def test_zero_quantity_line_contributes_nothing(self):
        ledger, pid = _setup()
        oid = _place(ledger, [pid], [0], "0.01")
        assert ledger.orders.get_by_id(oid).total_amount.is_zero


class TestValidation:

    def test_length_mismatch(self):
        ledger, pid = _setup()
        with pytest.raises(InvalidInput):
            _place(ledger, [pid, pid], [1], "500")

    def test_insufficient_stock(self):
        ledger, pid = _setup(quantity=2)
        with pytest.raises(InsufficientResource, match="Insufficient stock"):
            _place(ledger, [pid], [3], "500")

    def test_unknown_product(self):
        ledger, _ = _setup()
        with pytest.raises(InsufficientResource, match="not listed"):
            _place(ledger, [77], [1], "500")

    def test_unlisted_product_rejected_even_for_zero_quantity(self):
        ledger, _ = _setup()
        with pytest.raises(InsufficientResource, match="not listed"):
            _place(ledger, [77], [0], "500")
        assert len(ledger.orders) == 0

    def test_sub_cent_payment_rejected(self):
        ledger, pid = _setup()
        with pytest.raises(InvalidInput, match="finer than"):
            _place(ledger, [pid], [1], "50.015")
        assert ledger.payments.transfers == []

    def test_stock_checked_but_never_decremented(self):
        ledger, pid = _setup(quantity=2)
        _place(ledger, [pid], [2], "100.01")
        _place(ledger, [pid], [2], "100.01")
        assert ledger.products.get_by_id(pid).available_quantity.value == 2

    def test_insufficient_funds(self):
        ledger, pid = _setup()
        with pytest.raises(InsufficientResource, match="Insufficient funds"):
            _place(ledger, [pid], [1], "50.00")

    def test_unknown_shipping_option(self):
        ledger, pid = _setup()
        with pytest.raises(InvalidInput, match="shipping option"):
            _place(ledger, [pid], [1], "60", shipping="TELEPORT")


class TestSettlement:

    def test_overpayment_refunded_exactly(self):
        ledger, pid = _setup()
        _place(ledger, [pid], [1], "60", shipping=ShippingOption.OVERNIGHT)
        assert ledger.payments.transfers == [("bob", Money.of("9.95"))]

    def test_exact_payment_no_transfer(self):
        ledger, pid = _setup()
        _place(ledger, [pid], [1], "50.02", shipping="express")
        assert ledger.payments.transfers == []

    def test_rejected_refund_rolls_everything_back(self):
        ledger, pid = _setup()
        ledger.payments.accept = False
        events_before = list(ledger.publisher.events)
        with pytest.raises(TransferFailed):
            _place(ledger, [pid, pid], [2, 1], "500")
        assert len(ledger.orders) == 0
        assert len(ledger.approvals) == 0
        assert ledger.orders.next_id() == 1
        assert ledger.publisher.events == events_before

    def test_exact_payment_succeeds_even_if_gateway_would_reject(self):
        ledger, pid = _setup()
        ledger.payments.accept = False
        oid = _place(ledger, [pid], [1], "50.01")
        assert ledger.orders.get_by_id(oid) is not None


class TestAtomicity:

    def test_flat_discount_above_price_aborts_placement(self):
        ledger, pid = _setup(price="50")
        ledger.add_discount_handler().handle(pid, "flat", "60", TOMORROW, caller="vera")
        events_before = list(ledger.publisher.events)

        with pytest.raises(ArithmeticFault):
            _place(ledger, [pid], [1], "100")

        assert len(ledger.orders) == 0
        assert ledger.orders.next_id() == 1
        assert ledger.publisher.events == events_before
        assert ledger.payments.transfers == []


class TestCommit:

    def test_sequential_ids(self):
        ledger, pid = _setup()
        first = _place(ledger, [pid], [1], "50.01")
        second = _place(ledger, [pid], [1], "50.01")
        assert (first, second) == (1, 2)

    def test_order_fields(self):
        ledger, pid = _setup()
        oid = _place(ledger, [pid], [1], "50.05", shipping="overnight", buyer="bob")
        order = ledger.orders.get_by_id(oid)
        assert order.buyer == "bob"
        assert order.fulfilled is False
        assert order.shipping_option is ShippingOption.OVERNIGHT
        assert order.shipping_address == "1 Main St"
        assert order.created_at == NOW

    def test_high_value_opens_approval_record(self):
        ledger, pid = _setup()
        oid = _place(ledger, [pid], [2], "100.01")
        record = ledger.approvals.get_by_order_id(oid)
        assert record.approvals_count == 0
        assert record.approved_by == set()

    def test_below_threshold_opens_nothing(self):
        ledger, pid = _setup()
        oid = _place(ledger, [pid], [1], "50.01")
        assert ledger.approvals.get_by_order_id(oid) is None

    def test_emits_order_created(self):
        ledger, pid = _setup()
        oid = _place(ledger, [pid], [1], "50.01")
        event = ledger.publisher.events[-1]
        assert event.event_type == "OrderCreated"
        assert event.order_id == oid
        assert event.total_amount == "50"
