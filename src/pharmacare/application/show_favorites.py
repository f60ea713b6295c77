"""Application service: Show Favorites use case (query).

Filters the catalog down to the favorites, so products come back in
catalog order. Favorite ids the catalog no longer knows are left out
of the listing; they stay in the stored set.
"""

from __future__ import annotations

from pharmacare.application.dto import ProductDTO
from pharmacare.application.favorites_store import FavoritesStore
from pharmacare.domain.repository.product_repository import ProductRepository


class ShowFavoritesHandler:

    def __init__(
        self,
        favorites_store: FavoritesStore,
        product_repo: ProductRepository,
    ) -> None:
        self._favorites_store = favorites_store
        self._product_repo = product_repo

    def handle(self) -> list[ProductDTO]:
        return [
            ProductDTO.from_product(product)
            for product in self._product_repo.list_all()
            if self._favorites_store.is_favorite(product.id)
        ]
