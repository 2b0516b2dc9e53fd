"""Concrete collaborators used when the ledger runs from the CLI."""

from __future__ import annotations

import json
from datetime import datetime, timezone
from pathlib import Path

import structlog

from bazaar.domain.events import DomainEvent
from bazaar.domain.model.value_objects import Money
from bazaar.domain.ports import Clock, NotificationPublisher, PaymentGateway

logger = structlog.get_logger(__name__)


class SystemClock(Clock):

    def now(self) -> datetime:
        return datetime.now(timezone.utc)


class JsonPaymentGateway(PaymentGateway):
    """Records every transfer in a JSON file; never rejects one."""

    def __init__(self, file_path: Path, clock: Clock) -> None:
        self._file_path = file_path
        self._clock = clock
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text("[]", encoding="utf-8")

    def transfer(self, to: str, amount: Money) -> bool:
        transfers = json.loads(self._file_path.read_text(encoding="utf-8"))
        transfers.append(
            {
                "to": to,
                "amount": str(amount.amount),
                "currency": amount.currency,
                "at": self._clock.now().isoformat(),
            }
        )
        self._file_path.write_text(
            json.dumps(transfers, indent=2) + "\n", encoding="utf-8"
        )
        logger.info("Transfer sent", to=to, amount=str(amount.amount))
        return True


class LoggingNotificationPublisher(NotificationPublisher):
    """Emits each notification as a structured log line."""

    def publish(self, event: DomainEvent) -> None:
        logger.info("Notification", notification=event.event_type, **event.payload())
