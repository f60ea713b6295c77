"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass

from pharmacare.domain.model.product import Product


@dataclass(frozen=True)
class ProductDTO:
    """Output: a catalog product as displayed to the shopper."""

    id: str
    name: str
    category: str
    price: str  # formatted, e.g. "45,00 DH"
    in_stock: bool
    rating: str
    review_count: int
    description: str

    @staticmethod
    def from_product(product: Product) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            category=product.category,
            price=str(product.price),
            in_stock=product.in_stock,
            rating=str(product.rating),
            review_count=product.review_count,
            description=product.description,
        )


@dataclass(frozen=True)
class CartLineDTO:
    """Output: a single cart line."""

    product_id: str
    product_name: str
    quantity: int
    unit_price: str
    line_total: str


@dataclass(frozen=True)
class CartDTO:
    """Output: the whole cart with its totals."""

    lines: list[CartLineDTO]
    total_items: int
    total_price: str
