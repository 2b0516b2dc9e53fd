"""Helpers shared by the CLI command modules."""

from __future__ import annotations

from datetime import datetime, timezone

import click
import structlog

from bazaar.domain.exceptions import DomainException

logger = structlog.get_logger(__name__)

caller_option = click.option(
    "--as", "caller", required=True, help="Identity the command runs as."
)


def rejected(exc: DomainException) -> click.ClickException:
    """Log a rejected operation and turn it into a CLI error."""
    logger.warning("Operation rejected", error=type(exc).__name__, reason=str(exc))
    return click.ClickException(f"{type(exc).__name__}: {exc}")


def parse_instant(raw: str) -> datetime:
    """Parse an ISO-8601 instant; naive values are taken as UTC."""
    try:
        value = datetime.fromisoformat(raw)
    except ValueError:
        raise click.BadParameter(f"Invalid ISO-8601 instant '{raw}'.")
    if value.tzinfo is None:
        value = value.replace(tzinfo=timezone.utc)
    return value
