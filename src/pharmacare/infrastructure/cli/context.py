"""Per-invocation CLI state.

The root command starts one ShopSession and parks it on the click
context; commands reach it through ``require_session``. Asking for it
anywhere the root command has not run is a programming error.
"""

from __future__ import annotations

from dataclasses import dataclass
from pathlib import Path

import click

from pharmacare.application.session import ShopSession
from pharmacare.domain.exceptions import StoreScopeError
from pharmacare.infrastructure.bootstrap import product_repository
from pharmacare.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)


@dataclass
class CliState:
    data_dir: Path
    session: ShopSession | None = None


def require_session(ctx: click.Context) -> ShopSession:
    state = ctx.find_object(CliState)
    if state is None or state.session is None:
        raise StoreScopeError(
            "Cart and favorites must be used within a shop session"
        )
    return state.session


def catalog(ctx: click.Context) -> JsonProductRepository:
    state = ctx.find_object(CliState)
    if state is None:
        raise StoreScopeError("Catalog must be used within a shop session")
    return product_repository(state.data_dir)
