"""CLI commands for browsing the catalog."""

from __future__ import annotations

import click

from pharmacare.application.browse_catalog import BrowseCatalogHandler
from pharmacare.domain.exceptions import DomainException
from pharmacare.infrastructure.cli.context import catalog, require_session


@click.command("list")
@click.option("--category", default=None, help="Only show this category.")
@click.option("--search", default=None, help="Match name, description or category.")
@click.pass_context
def product_list(ctx: click.Context, category: str | None, search: str | None) -> None:
    """List products in the catalog."""
    handler = BrowseCatalogHandler(product_repo=catalog(ctx))

    try:
        products = handler.handle(category=category, search=search)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if not products:
        click.echo("No products found.")
        return

    favorites = require_session(ctx).favorites
    click.echo(f"{'ID':<6} {'Name':<28} {'Category':<14} {'Price':>12}  ")
    click.echo("-" * 66)
    for p in products:
        heart = "♥" if favorites.is_favorite(p.id) else " "
        click.echo(f"{p.id:<6} {p.name:<28} {p.category:<14} {p.price:>12}  {heart}")


@click.command("show")
@click.argument("product_id")
@click.pass_context
def product_show(ctx: click.Context, product_id: str) -> None:
    """Show one product."""
    handler = BrowseCatalogHandler(product_repo=catalog(ctx))

    try:
        p = handler.get(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"{p.name}  ({p.category})")
    click.echo(p.description)
    click.echo(f"Price:   {p.price}")
    click.echo(f"Rating:  {p.rating} ({p.review_count} reviews)")
    click.echo(f"Stock:   {'in stock' if p.in_stock else 'out of stock'}")
