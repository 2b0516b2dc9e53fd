"""CLI commands for the Product aggregate."""

from __future__ import annotations

import click

from bazaar.application.add_product import AddProductHandler
from bazaar.application.effective_price import EffectivePriceHandler
from bazaar.application.update_product import UpdateProductHandler
from bazaar.domain.exceptions import DomainException
from bazaar.infrastructure.bootstrap import (
    clock,
    discount_repository,
    notification_publisher,
    product_repository,
)
from bazaar.infrastructure.cli.common import caller_option, rejected


@click.command("add")
@caller_option
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 15.00).")
@click.option("--quantity", required=True, type=int, help="Units available.")
@click.pass_obj
def product_add(data_dir, caller: str, name: str, price: str, quantity: int) -> None:
    """List a new product."""
    handler = AddProductHandler(
        product_repo=product_repository(data_dir),
        publisher=notification_publisher(),
    )

    try:
        product_id = handler.handle(name=name, price=price, quantity=quantity, caller=caller)
    except DomainException as exc:
        raise rejected(exc)

    click.echo(f"Product #{product_id} '{name}' listed by {caller}")


@click.command("update")
@caller_option
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.option("--name", required=True, help="Product name.")
@click.option("--price", required=True, help="Unit price (e.g. 29.99).")
@click.option("--quantity", required=True, type=int, help="Units available.")
@click.pass_obj
def product_update(
    data_dir, caller: str, product_id: int, name: str, price: str, quantity: int
) -> None:
    """Replace a product record (vendor only)."""
    handler = UpdateProductHandler(product_repo=product_repository(data_dir))

    try:
        handler.handle(
            product_id=product_id, name=name, price=price, quantity=quantity, caller=caller
        )
    except DomainException as exc:
        raise rejected(exc)

    click.echo(f"Product #{product_id} updated")


@click.command("list")
@click.pass_obj
def product_list(data_dir) -> None:
    """List all products in the catalog."""
    products = product_repository(data_dir).list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Price':>10} {'Qty':>6}  Vendor")
    click.echo("-" * 56)
    for p in products:
        click.echo(
            f"{p.id:<6} {p.name:<20} {str(p.unit_price):>10} "
            f"{p.available_quantity.value:>6}  {p.vendor}"
        )


@click.command("price")
@click.option("--id", "product_id", required=True, type=int, help="Product ID.")
@click.pass_obj
def product_price(data_dir, product_id: int) -> None:
    """Show a product's effective price right now."""
    handler = EffectivePriceHandler(
        product_repo=product_repository(data_dir),
        discount_repo=discount_repository(data_dir),
        clock=clock(),
    )

    try:
        price = handler.handle(product_id)
    except DomainException as exc:
        raise rejected(exc)

    click.echo(f"Product #{product_id} effective price: {price}")
