"""The client session: one Cart Store and one Favorites Store.

The application root builds a ShopSession once at start-up and owns
it; everything else receives it by reference.
"""

from __future__ import annotations

from dataclasses import dataclass

from pharmacare.application.cart_store import CartStore
from pharmacare.application.favorites_store import FavoritesStore
from pharmacare.application.notifications import Notifier
from pharmacare.domain.repository.local_storage import LocalStorage


@dataclass(frozen=True)
class ShopSession:

    cart: CartStore
    favorites: FavoritesStore

    @staticmethod
    def start(storage: LocalStorage, notifier: Notifier) -> ShopSession:
        """Create an empty cart and hydrate favorites from *storage*."""
        return ShopSession(
            cart=CartStore(notifier),
            favorites=FavoritesStore(storage, notifier),
        )
