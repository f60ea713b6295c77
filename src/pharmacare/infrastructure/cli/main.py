import logging
from pathlib import Path

import click

from pharmacare.infrastructure.bootstrap import DEFAULT_DATA_DIR, start_session
from pharmacare.infrastructure.cli.cart_commands import (
    cart_add,
    cart_clear,
    cart_remove,
    cart_show,
    cart_update,
)
from pharmacare.infrastructure.cli.context import CliState
from pharmacare.infrastructure.cli.favorites_commands import (
    favorites_add,
    favorites_count,
    favorites_list,
    favorites_remove,
    favorites_toggle,
)
from pharmacare.infrastructure.cli.product_commands import product_list, product_show
from pharmacare.infrastructure.notifiers import EchoNotifier, LoggingNotifier


@click.group()
@click.option(
    "--data-dir",
    type=click.Path(file_okay=False, path_type=Path),
    default=DEFAULT_DATA_DIR,
    envvar="PHARMACARE_DATA_DIR",
    show_default=True,
    help="Directory holding products.json and local_storage.json.",
)
@click.option("-v", "--verbose", is_flag=True, default=False, help="Debug logging.")
@click.option(
    "--quiet",
    is_flag=True,
    default=False,
    help="Send notifications to the log instead of the terminal.",
)
@click.pass_context
def cli(ctx: click.Context, data_dir: Path, verbose: bool, quiet: bool) -> None:
    """PharmaCare parapharmacy storefront."""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(levelname)s %(name)s: %(message)s",
    )
    notifier = LoggingNotifier() if quiet else EchoNotifier()
    ctx.obj = CliState(data_dir=data_dir, session=start_session(data_dir, notifier))


@cli.group()
def products() -> None:
    """Browse the catalog."""


@cli.group(chain=True)
def cart() -> None:
    """Manage the cart (commands chain within one session)."""


@cli.group(chain=True)
def favorites() -> None:
    """Manage favorites."""


# Register subcommands
products.add_command(product_list)
products.add_command(product_show)
cart.add_command(cart_add)
cart.add_command(cart_remove)
cart.add_command(cart_update)
cart.add_command(cart_clear)
cart.add_command(cart_show)
favorites.add_command(favorites_add)
favorites.add_command(favorites_remove)
favorites.add_command(favorites_toggle)
favorites.add_command(favorites_list)
favorites.add_command(favorites_count)
