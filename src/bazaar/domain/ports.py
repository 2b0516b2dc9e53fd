"""Collaborators the ledger consumes but does not implement.

The host supplies the payment rail, the clock and the notification sink.
Concrete adapters live in the infrastructure layer; tests use fakes.
"""

from __future__ import annotations

from abc import ABC, abstractmethod
from datetime import datetime

from bazaar.domain.events import DomainEvent
from bazaar.domain.model.value_objects import Money


class PaymentGateway(ABC):

    @abstractmethod
    def transfer(self, to: str, amount: Money) -> bool:
        """Send ``amount`` to ``to``. Return False if the transfer was rejected."""


class Clock(ABC):

    @abstractmethod
    def now(self) -> datetime:
        """Current instant, timezone-aware and monotonic."""


class NotificationPublisher(ABC):

    @abstractmethod
    def publish(self, event: DomainEvent) -> None:
        """Hand a committed notification to outside monitoring."""
