"""Data Transfer Objects: plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class OrderDTO:
    """Output: an order and its approval gate as displayed to the user."""

    id: int
    buyer: str
    total: str  # formatted, e.g. "$15.00"
    shipping_option: str
    shipping_cost: str
    shipping_address: str
    fulfilled: bool
    created_at: str
    gate_state: str
    approvals_count: int
    quorum: int
