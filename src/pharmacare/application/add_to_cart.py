"""Application service: Add To Cart use case.

The Cart Store works on resolved Product values; this handler is where
a product id from the outside world is looked up in the catalog.
"""

from __future__ import annotations

from pharmacare.application.cart_store import CartStore
from pharmacare.domain.exceptions import EntityNotFoundError
from pharmacare.domain.repository.product_repository import ProductRepository


class AddToCartHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        cart_store: CartStore,
    ) -> None:
        self._product_repo = product_repo
        self._cart_store = cart_store

    def handle(self, product_id: str, quantity: int = 1) -> None:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        self._cart_store.add_to_cart(product, quantity)
