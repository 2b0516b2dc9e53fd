"""Abstract repository for Discount records."""

from __future__ import annotations

from abc import ABC, abstractmethod

from bazaar.domain.model.discount import Discount


class DiscountRepository(ABC):

    @abstractmethod
    def next_id(self) -> int:
        """Return the id the next new discount will receive."""

    @abstractmethod
    def get_by_id(self, discount_id: int) -> Discount | None:
        """Return a discount by its own ID, or None if not found."""

    @abstractmethod
    def add(self, discount: Discount) -> Discount:
        """Persist a new discount under ``next_id()`` and return it with its id."""
