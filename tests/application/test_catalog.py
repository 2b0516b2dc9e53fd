"""Integration tests for the AddProduct and UpdateProduct use cases."""

import pytest

from bazaar.domain.events import ProductCreated
from bazaar.domain.exceptions import InvalidInput, Unauthorized
from bazaar.domain.model.value_objects import Money
from tests.fakes import FakeLedger


class TestAddProduct:

    def test_assigns_sequential_ids(self):
        ledger = FakeLedger()
        handler = ledger.add_product_handler()
        first = handler.handle("Lamp", "50", 10, caller="vera")
        second = handler.handle("Rug", "80", 2, caller="vera")
        assert (first, second) == (1, 2)

    def test_stores_caller_as_vendor(self):
        ledger = FakeLedger()
        pid = ledger.add_product_handler().handle("Lamp", "50", 10, caller="vera")
        product = ledger.products.get_by_id(pid)
        assert product.vendor == "vera"
        assert product.unit_price == Money.of("50")
        assert product.available_quantity.value == 10

    def test_zero_price_and_quantity_allowed(self):
        ledger = FakeLedger()
        pid = ledger.add_product_handler().handle("Freebie", "0", 0, caller="vera")
        assert ledger.products.get_by_id(pid).unit_price.is_zero

    def test_sub_cent_price_rejected(self):
        ledger = FakeLedger()
        with pytest.raises(InvalidInput, match="finer than"):
            ledger.add_product_handler().handle("Bolt", "12.345", 5, caller="vera")
        assert ledger.products.list_all() == []

    def test_emits_product_created(self):
        ledger = FakeLedger()
        pid = ledger.add_product_handler().handle("Lamp", "50", 10, caller="vera")
        assert ledger.publisher.events == [
            ProductCreated(
                product_id=pid, name="Lamp", unit_price="50", available_quantity=10, vendor="vera"
            )
        ]


class TestUpdateProduct:

    def _listed(self):
        ledger = FakeLedger()
        pid = ledger.add_product_handler().handle("Lamp", "50", 10, caller="vera")
        return ledger, pid

    def test_vendor_replaces_record(self):
        ledger, pid = self._listed()
        ledger.update_product_handler().handle(pid, "Desk Lamp", "45", 4, caller="vera")
        product = ledger.products.get_by_id(pid)
        assert product.name == "Desk Lamp"
        assert product.unit_price == Money.of("45")
        assert product.available_quantity.value == 4
        assert product.vendor == "vera"

    def test_other_caller_rejected_and_nothing_changes(self):
        ledger, pid = self._listed()
        with pytest.raises(Unauthorized):
            ledger.update_product_handler().handle(pid, "Stolen", "1", 0, caller="mallory")
        product = ledger.products.get_by_id(pid)
        assert product.name == "Lamp"
        assert product.unit_price == Money.of("50")
        assert product.vendor == "vera"

    def test_unknown_product_is_unauthorized(self):
        ledger, _ = self._listed()
        with pytest.raises(Unauthorized):
            ledger.update_product_handler().handle(99, "Ghost", "1", 1, caller="vera")
        assert ledger.products.get_by_id(99) is None

    def test_update_emits_nothing(self):
        ledger, pid = self._listed()
        ledger.update_product_handler().handle(pid, "Lamp", "40", 10, caller="vera")
        assert ledger.publisher.event_types == ["ProductCreated"]
