"""Application service: the Favorites Store.

Keeps the shopper's FavoriteSet in sync with durable local storage.

Hydration happens once, at construction. A missing entry yields an
empty set; an unreadable or malformed one is logged and also yields an
empty set (the next mutation overwrites it).

Every mutation is write-through: the full set is serialized back to
storage before the call returns. If that write fails the error is
logged and swallowed, and the in-memory set stays authoritative for the
rest of the session.
"""

from __future__ import annotations

import json
import logging

from pharmacare.application.notifications import Notification, Notifier
from pharmacare.domain.model.favorites import FavoriteSet
from pharmacare.domain.repository.local_storage import LocalStorage

logger = logging.getLogger(__name__)

FAVORITES_STORAGE_KEY = "pharmaCare_favorites"


class FavoritesStore:

    def __init__(
        self,
        storage: LocalStorage,
        notifier: Notifier,
        storage_key: str = FAVORITES_STORAGE_KEY,
    ) -> None:
        self._storage = storage
        self._notifier = notifier
        self._storage_key = storage_key
        self._favorites = self._hydrate()

    @property
    def favorites(self) -> list[str]:
        return list(self._favorites.product_ids)

    # --- Commands -------------------------------------------------------------

    def add_to_favorites(self, product_id: str) -> None:
        self._favorites.add(product_id)
        self._persist()

    def remove_from_favorites(self, product_id: str) -> None:
        self._favorites.remove(product_id)
        self._persist()

    def toggle_favorite(self, product_id: str, display_name: str | None = None) -> bool:
        """Flip membership of *product_id*. Returns True if now a favorite."""
        now_favorite = self._favorites.toggle(product_id)
        self._persist()

        if now_favorite:
            self._notifier.notify(Notification(
                title="Ajouté aux favoris",
                description=(
                    f"{display_name} ajouté à vos favoris"
                    if display_name
                    else "Produit ajouté à vos favoris"
                ),
            ))
        else:
            self._notifier.notify(Notification(
                title="Retiré des favoris",
                description=(
                    f"{display_name} retiré de vos favoris"
                    if display_name
                    else "Produit retiré de vos favoris"
                ),
            ))
        return now_favorite

    # --- Queries --------------------------------------------------------------

    def is_favorite(self, product_id: str) -> bool:
        return product_id in self._favorites

    def get_favorites_count(self) -> int:
        return len(self._favorites)

    # --- Storage helpers ------------------------------------------------------

    def _hydrate(self) -> FavoriteSet:
        try:
            raw = self._storage.get_item(self._storage_key)
        except OSError:
            logger.exception("Failed to read favorites from local storage")
            return FavoriteSet()

        if raw is None:
            return FavoriteSet()

        if not isinstance(raw, str):
            logger.warning(
                "Ignoring favorites in local storage: expected text, got %s",
                type(raw).__name__,
            )
            return FavoriteSet()

        try:
            ids = json.loads(raw)
        except ValueError as exc:
            logger.warning("Failed to parse favorites from local storage: %s", exc)
            return FavoriteSet()

        if not isinstance(ids, list) or not all(isinstance(i, str) for i in ids):
            logger.warning(
                "Ignoring favorites in local storage: expected a list of ids, got %r",
                raw,
            )
            return FavoriteSet()

        return FavoriteSet(ids)

    def _persist(self) -> None:
        try:
            self._storage.set_item(
                self._storage_key, json.dumps(self._favorites.product_ids)
            )
        except OSError:
            logger.exception(
                "Failed to write favorites to local storage; keeping %d in memory",
                len(self._favorites),
            )
