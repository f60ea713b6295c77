"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.
"""

from __future__ import annotations

from pathlib import Path

from pharmacare.application.notifications import Notifier
from pharmacare.application.session import ShopSession
from pharmacare.infrastructure.notifiers import EchoNotifier
from pharmacare.infrastructure.persistence.json_local_storage import (
    JsonLocalStorage,
)
from pharmacare.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)

# Resolve data directory relative to the project root.
# When installed in editable mode the project root is the repo root.
DEFAULT_DATA_DIR = Path(__file__).resolve().parents[3] / "data"


def product_repository(data_dir: Path = DEFAULT_DATA_DIR) -> JsonProductRepository:
    return JsonProductRepository(data_dir / "products.json")


def local_storage(data_dir: Path = DEFAULT_DATA_DIR) -> JsonLocalStorage:
    return JsonLocalStorage(data_dir / "local_storage.json")


def start_session(
    data_dir: Path = DEFAULT_DATA_DIR,
    notifier: Notifier | None = None,
) -> ShopSession:
    return ShopSession.start(
        storage=local_storage(data_dir),
        notifier=notifier if notifier is not None else EchoNotifier(),
    )
