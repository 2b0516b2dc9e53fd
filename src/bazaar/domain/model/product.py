"""Product aggregate.

Products belong to the vendor identity that listed them. They are never
deleted; a vendor can only replace the whole record.
"""

from __future__ import annotations

from dataclasses import dataclass

from bazaar.domain.model.value_objects import Money, Quantity


@dataclass
class Product:
    """A product in the catalog.

    ``available_quantity`` is checked when an order is placed but never
    decremented by it, so it is a listing figure rather than live stock.
    """

    id: int | None
    name: str
    unit_price: Money
    available_quantity: Quantity
    vendor: str

    @staticmethod
    def create(name: str, unit_price: Money, quantity: Quantity, vendor: str) -> Product:
        return Product(
            id=None,
            name=name,
            unit_price=unit_price,
            available_quantity=quantity,
            vendor=vendor,
        )

    def replace(self, name: str, unit_price: Money, quantity: Quantity, vendor: str) -> None:
        """Overwrite every field, vendor included.

        Callers must have checked ``vendor == self.vendor`` first, so the
        vendor never actually changes.
        """
        self.name = name
        self.unit_price = unit_price
        self.available_quantity = quantity
        self.vendor = vendor
