"""CLI commands for discounts."""

from __future__ import annotations

import click

from bazaar.application.add_discount import AddDiscountHandler
from bazaar.domain.exceptions import DomainException
from bazaar.infrastructure.bootstrap import (
    discount_repository,
    notification_publisher,
    product_repository,
)
from bazaar.infrastructure.cli.common import caller_option, parse_instant, rejected


@click.command("add")
@caller_option
@click.option("--product", "product_id", required=True, type=int, help="Product ID.")
@click.option(
    "--kind",
    required=True,
    type=click.Choice(["flat", "percentage"], case_sensitive=False),
    help="Flat amount off, or a whole-number percentage off.",
)
@click.option("--value", required=True, help="Amount (flat) or percent (percentage).")
@click.option("--valid-until", required=True, help="ISO-8601 expiry instant.")
@click.pass_obj
def discount_add(
    data_dir, caller: str, product_id: int, kind: str, value: str, valid_until: str
) -> None:
    """Create a discount for one of your products."""
    expires = parse_instant(valid_until)
    handler = AddDiscountHandler(
        product_repo=product_repository(data_dir),
        discount_repo=discount_repository(data_dir),
        publisher=notification_publisher(),
    )

    try:
        discount_id = handler.handle(
            product_id=product_id,
            kind=kind,
            value=value,
            valid_until=expires,
            caller=caller,
        )
    except DomainException as exc:
        raise rejected(exc)

    click.echo(f"Discount #{discount_id} created for product #{product_id}")
