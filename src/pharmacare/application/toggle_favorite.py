"""Application service: Toggle Favorite use case.

Looks the product up only to name it in the notification; ids unknown
to the catalog can still be toggled.
"""

from __future__ import annotations

from pharmacare.application.favorites_store import FavoritesStore
from pharmacare.domain.repository.product_repository import ProductRepository


class ToggleFavoriteHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        favorites_store: FavoritesStore,
    ) -> None:
        self._product_repo = product_repo
        self._favorites_store = favorites_store

    def handle(self, product_id: str) -> bool:
        product = self._product_repo.get_by_id(product_id)
        display_name = product.name if product is not None else None
        return self._favorites_store.toggle_favorite(product_id, display_name)
