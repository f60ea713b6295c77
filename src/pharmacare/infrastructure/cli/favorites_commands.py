"""CLI commands for the favorites list (persisted between runs)."""

from __future__ import annotations

import click

from pharmacare.application.show_favorites import ShowFavoritesHandler
from pharmacare.application.toggle_favorite import ToggleFavoriteHandler
from pharmacare.domain.exceptions import DomainException
from pharmacare.infrastructure.cli.context import catalog, require_session


@click.command("add")
@click.argument("product_id")
@click.pass_context
def favorites_add(ctx: click.Context, product_id: str) -> None:
    """Mark a product as favorite."""
    require_session(ctx).favorites.add_to_favorites(product_id)
    click.echo(f"Product #{product_id} is a favorite.")


@click.command("remove")
@click.argument("product_id")
@click.pass_context
def favorites_remove(ctx: click.Context, product_id: str) -> None:
    """Unmark a favorite product."""
    require_session(ctx).favorites.remove_from_favorites(product_id)
    click.echo(f"Product #{product_id} is not a favorite.")


@click.command("toggle")
@click.argument("product_id")
@click.pass_context
def favorites_toggle(ctx: click.Context, product_id: str) -> None:
    """Flip a product in or out of the favorites."""
    handler = ToggleFavoriteHandler(
        product_repo=catalog(ctx),
        favorites_store=require_session(ctx).favorites,
    )

    try:
        handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))


@click.command("list")
@click.pass_context
def favorites_list(ctx: click.Context) -> None:
    """List favorite products."""
    handler = ShowFavoritesHandler(
        favorites_store=require_session(ctx).favorites,
        product_repo=catalog(ctx),
    )

    try:
        products = handler.handle()
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No favorites yet.")
        return

    click.echo(f"{'ID':<6} {'Name':<28} {'Price':>12}")
    click.echo("-" * 48)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<28} {p.price:>12}")


@click.command("count")
@click.pass_context
def favorites_count(ctx: click.Context) -> None:
    """Print how many favorites are stored."""
    click.echo(require_session(ctx).favorites.get_favorites_count())
