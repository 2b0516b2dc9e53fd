"""Unit tests for the Order aggregate and shipping table."""

import pytest

from bazaar.domain.exceptions import AlreadyDone
from bazaar.domain.model.order import Order, ShippingOption, shipping_cost
from bazaar.domain.model.value_objects import Money
from tests.fakes import NOW


def _order(total: str = "80") -> Order:
    return Order.place(
        buyer="bob",
        total_amount=Money.of(total),
        shipping_option=ShippingOption.STANDARD,
        shipping_address="1 Main St",
        placed_at=NOW,
    )


class TestOrderPlacement:

    def test_new_order_is_unfulfilled(self):
        order = _order()
        assert order.fulfilled is False
        assert order.id is None  # assigned by repository
        assert order.created_at == NOW

    def test_high_value_at_threshold(self):
        assert _order("100").is_high_value(Money.of("100"))
        assert not _order("99.99").is_high_value(Money.of("100"))


class TestFulfill:

    def test_fulfill_once(self):
        order = _order()
        order.fulfill()
        assert order.fulfilled is True

    def test_second_fulfill_rejected(self):
        order = _order()
        order.fulfill()
        with pytest.raises(AlreadyDone, match="already fulfilled"):
            order.fulfill()
        assert order.fulfilled is True


class TestShippingCost:

    @pytest.mark.parametrize(
        "option, expected",
        [
            (ShippingOption.STANDARD, "0.01"),
            (ShippingOption.EXPRESS, "0.02"),
            (ShippingOption.OVERNIGHT, "0.05"),
        ],
    )
    def test_rates(self, option, expected):
        assert shipping_cost(option) == Money.of(expected)
