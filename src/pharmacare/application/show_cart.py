"""Application service: Show Cart use case (query)."""

from __future__ import annotations

from pharmacare.application.cart_store import CartStore
from pharmacare.application.dto import CartDTO, CartLineDTO


class ShowCartHandler:

    def __init__(self, cart_store: CartStore) -> None:
        self._cart_store = cart_store

    def handle(self) -> CartDTO:
        return CartDTO(
            lines=[
                CartLineDTO(
                    product_id=line.product_id,
                    product_name=line.product.name,
                    quantity=line.quantity.value,
                    unit_price=str(line.product.price),
                    line_total=str(line.line_total),
                )
                for line in self._cart_store.items
            ],
            total_items=self._cart_store.get_total_items(),
            total_price=str(self._cart_store.get_total_price()),
        )
