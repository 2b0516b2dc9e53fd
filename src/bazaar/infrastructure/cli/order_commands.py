"""CLI commands for the Order aggregate and its approval gate."""

from __future__ import annotations

import click

from bazaar.application.approve_order import ApproveOrderHandler
from bazaar.application.dto import OrderDTO
from bazaar.application.fulfill_order import FulfillOrderHandler
from bazaar.application.place_order import PlaceOrderHandler
from bazaar.application.show_order import ShowOrderHandler
from bazaar.domain.exceptions import DomainException
from bazaar.domain.model.order import ShippingOption, shipping_cost
from bazaar.infrastructure.bootstrap import (
    approval_repository,
    clock,
    discount_repository,
    market_config,
    notification_publisher,
    order_repository,
    payment_gateway,
    product_repository,
)
from bazaar.infrastructure.cli.common import caller_option, rejected

_SHIPPING_CHOICES = click.Choice([o.value for o in ShippingOption], case_sensitive=False)


def _parse_items(raw: str) -> tuple[list[int], list[int]]:
    """Parse '1:3,2:5' into parallel product-id and quantity lists."""
    product_ids: list[int] = []
    quantities: list[int] = []
    for pair in raw.split(","):
        pair = pair.strip()
        if ":" not in pair:
            raise click.BadParameter(
                f"Invalid item format '{pair}'. Expected 'ProductId:Quantity'."
            )
        id_str, qty_str = pair.split(":", 1)
        try:
            product_ids.append(int(id_str))
            quantities.append(int(qty_str))
        except ValueError:
            raise click.BadParameter(f"Invalid item '{pair}'. Both parts must be integers.")
    return product_ids, quantities


def _show_handler(data_dir) -> ShowOrderHandler:
    return ShowOrderHandler(
        order_repo=order_repository(data_dir),
        approval_repo=approval_repository(data_dir),
        config=market_config(data_dir),
    )


def _display_order(dto: OrderDTO) -> None:
    """Shared formatting for displaying an order."""
    click.echo(f"Order #{dto.id}  (fulfilled={'yes' if dto.fulfilled else 'no'})")
    click.echo(f"Buyer:    {dto.buyer}")
    click.echo(f"Created:  {dto.created_at}")
    click.echo(f"Ship to:  {dto.shipping_address or '-'}")
    click.echo()
    click.echo(f"  {'Order Total':<27} {dto.total:>12}")
    click.echo(f"  {'Shipping (' + dto.shipping_option + ')':<27} {dto.shipping_cost:>12}")
    click.echo()
    if dto.gate_state == "NO_GATE_NEEDED":
        click.echo("Approval: not required")
    else:
        click.echo(f"Approval: {dto.gate_state} ({dto.approvals_count}/{dto.quorum})")


@click.command("place")
@caller_option
@click.option("--items", required=True, help="Items as 'ProductId:Qty,ProductId:Qty'.")
@click.option("--shipping", default="STANDARD", type=_SHIPPING_CHOICES, show_default=True)
@click.option("--address", default="", help="Shipping address.")
@click.option("--payment", required=True, help="Amount paid (e.g. 80.05).")
@click.pass_obj
def order_place(
    data_dir, caller: str, items: str, shipping: str, address: str, payment: str
) -> None:
    """Place and pay for an order. Overpayment is refunded."""
    product_ids, quantities = _parse_items(items)

    handler = PlaceOrderHandler(
        product_repo=product_repository(data_dir),
        discount_repo=discount_repository(data_dir),
        order_repo=order_repository(data_dir),
        approval_repo=approval_repository(data_dir),
        payments=payment_gateway(data_dir),
        clock=clock(),
        publisher=notification_publisher(),
        config=market_config(data_dir),
    )

    try:
        order_id = handler.handle(
            product_ids=product_ids,
            quantities=quantities,
            shipping_option=shipping,
            shipping_address=address,
            payment=payment,
            buyer=caller,
        )
        dto = _show_handler(data_dir).handle(order_id)
    except DomainException as exc:
        raise rejected(exc)

    click.echo(f"Order #{order_id} placed")
    _display_order(dto)


@click.command("show")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to display.")
@click.pass_obj
def order_show(data_dir, order_id: int) -> None:
    """Show details of an existing order."""
    try:
        dto = _show_handler(data_dir).handle(order_id)
    except DomainException as exc:
        raise rejected(exc)

    _display_order(dto)


@click.command("approve")
@caller_option
@click.option("--id", "order_id", required=True, type=int, help="Order ID to approve.")
@click.pass_obj
def order_approve(data_dir, caller: str, order_id: int) -> None:
    """Approve a high-value order (approvers only)."""
    handler = ApproveOrderHandler(
        order_repo=order_repository(data_dir),
        approval_repo=approval_repository(data_dir),
        publisher=notification_publisher(),
        config=market_config(data_dir),
    )

    try:
        cleared = handler.handle(order_id, approver=caller)
    except DomainException as exc:
        raise rejected(exc)

    if cleared:
        click.echo(f"Order #{order_id} approved by {caller}: quorum reached, order fulfilled.")
    else:
        click.echo(f"Order #{order_id} approved by {caller}.")


@click.command("fulfill")
@click.option("--id", "order_id", required=True, type=int, help="Order ID to fulfill.")
@click.pass_obj
def order_fulfill(data_dir, order_id: int) -> None:
    """Mark an order fulfilled."""
    handler = FulfillOrderHandler(
        order_repo=order_repository(data_dir),
        publisher=notification_publisher(),
    )

    try:
        handler.handle(order_id)
    except DomainException as exc:
        raise rejected(exc)

    click.echo(f"Order #{order_id} fulfilled.")


@click.command("shipping-cost")
@click.option("--option", required=True, type=_SHIPPING_CHOICES)
def order_shipping_cost(option: str) -> None:
    """Show the shipping charge for an option."""
    click.echo(str(shipping_cost(ShippingOption(option.upper()))))
