"""Abstract repository for the product catalog.

Defined in the domain layer so the domain never depends on
infrastructure. The session stores only ever read from it.
"""

from __future__ import annotations

from abc import ABC, abstractmethod

from pharmacare.domain.model.product import Product


class ProductRepository(ABC):

    @abstractmethod
    def get_by_id(self, product_id: str) -> Product | None:
        """Return a product by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Product]:
        """Return every product in the catalog."""

    def list_by_category(self, category: str) -> list[Product]:
        return [p for p in self.list_all() if p.category.lower() == category.lower()]

    def search(self, query: str) -> list[Product]:
        """Case-insensitive match on name, description or category."""
        needle = query.lower()
        return [
            p
            for p in self.list_all()
            if needle in p.name.lower()
            or needle in p.description.lower()
            or needle in p.category.lower()
        ]
