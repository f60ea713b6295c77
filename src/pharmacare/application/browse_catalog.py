"""Application service: Browse Catalog use case (query)."""

from __future__ import annotations

from pharmacare.application.dto import ProductDTO
from pharmacare.domain.exceptions import EntityNotFoundError
from pharmacare.domain.repository.product_repository import ProductRepository


class BrowseCatalogHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(
        self,
        category: str | None = None,
        search: str | None = None,
    ) -> list[ProductDTO]:
        """List catalog products, optionally filtered by category and text."""
        if search:
            products = self._product_repo.search(search)
        else:
            products = self._product_repo.list_all()

        if category:
            products = [p for p in products if p.category.lower() == category.lower()]

        return [ProductDTO.from_product(p) for p in products]

    def get(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        return ProductDTO.from_product(product)
