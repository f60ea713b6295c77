"""CLI commands for the session cart.

The cart is not persisted, so these commands are chained within one
invocation: ``pharmacare cart add 1 -q 2 add 3 update 1 5 show``.
"""

from __future__ import annotations

import click

from pharmacare.application.add_to_cart import AddToCartHandler
from pharmacare.application.show_cart import ShowCartHandler
from pharmacare.domain.exceptions import DomainException
from pharmacare.infrastructure.cli.context import catalog, require_session


@click.command("add")
@click.argument("product_id")
@click.option("-q", "--quantity", default=1, show_default=True, type=int, help="Units to add.")
@click.pass_context
def cart_add(ctx: click.Context, product_id: str, quantity: int) -> None:
    """Add a product to the cart."""
    handler = AddToCartHandler(
        product_repo=catalog(ctx),
        cart_store=require_session(ctx).cart,
    )

    try:
        handler.handle(product_id, quantity)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("remove")
@click.argument("product_id")
@click.pass_context
def cart_remove(ctx: click.Context, product_id: str) -> None:
    """Remove a product's line from the cart."""
    require_session(ctx).cart.remove_from_cart(product_id)


@click.command("update")
@click.argument("product_id")
@click.argument("quantity", type=int)
@click.pass_context
def cart_update(ctx: click.Context, product_id: str, quantity: int) -> None:
    """Set a line's quantity (0 removes it)."""
    require_session(ctx).cart.update_quantity(product_id, quantity)


@click.command("clear")
@click.pass_context
def cart_clear(ctx: click.Context) -> None:
    """Empty the cart."""
    require_session(ctx).cart.clear_cart()


@click.command("show")
@click.pass_context
def cart_show(ctx: click.Context) -> None:
    """Show the cart and its totals."""
    dto = ShowCartHandler(require_session(ctx).cart).handle()

    if not dto.lines:
        click.echo("Cart is empty.")
        return

    click.echo(f"  {'Product':<28} {'Qty':>5} {'Price':>12} {'Total':>14}")
    click.echo(f"  {'-'*62}")
    for line in dto.lines:
        click.echo(
            f"  {line.product_name:<28} {line.quantity:>5} {line.unit_price:>12} {line.line_total:>14}"
        )
    click.echo(f"  {'-'*62}")
    click.echo(f"  {'Items':<28} {dto.total_items:>5}")
    click.echo(f"  {'Cart Total':<34} {dto.total_price:>27}")
