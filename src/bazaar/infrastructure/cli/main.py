from pathlib import Path

import click

from bazaar.infrastructure.bootstrap import DEFAULT_DATA_DIR, market_config
from bazaar.infrastructure.cli.discount_commands import discount_add
from bazaar.infrastructure.cli.order_commands import (
    order_approve,
    order_fulfill,
    order_place,
    order_shipping_cost,
    order_show,
)
from bazaar.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_price,
    product_update,
)
from bazaar.infrastructure.logging import configure_logging


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="BAZAAR_DATA_DIR",
    show_default=True,
    help="Directory holding the ledger's JSON files.",
)
@click.option("--verbose", is_flag=True, default=False, help="Log at DEBUG level.")
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool) -> None:
    """Bazaar: marketplace order ledger."""
    configure_logging(verbose)
    ctx.obj = data_dir


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def discount() -> None:
    """Manage discounts."""


@cli.group()
def order() -> None:
    """Place, approve and fulfill orders."""


@cli.group()
def config() -> None:
    """Inspect marketplace configuration."""


@config.command("show")
@click.pass_obj
def config_show(data_dir: Path) -> None:
    """Show owner, approvers and the high-value threshold."""
    settings = market_config(data_dir)
    click.echo(f"Owner:      {settings.owner}")
    click.echo(f"Approvers:  {', '.join(settings.approvers) or '-'}")
    click.echo(f"Quorum:     {settings.quorum}")
    click.echo(f"Threshold:  {settings.high_value_threshold}")


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_price)
product.add_command(product_update)
discount.add_command(discount_add)
order.add_command(order_approve)
order.add_command(order_fulfill)
order.add_command(order_place)
order.add_command(order_shipping_cost)
order.add_command(order_show)
