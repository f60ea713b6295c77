"""Application service: the session's Cart Store.

Wraps the Cart aggregate for one client session. Each operation runs
the pure transition on the aggregate first, then turns the outcome into
a notification. Nothing here is persisted; the cart lives and dies with
the session.
"""

from __future__ import annotations

import logging

from pharmacare.application.notifications import Notification, Notifier
from pharmacare.domain.model.cart import Cart, CartChange, CartLine
from pharmacare.domain.model.product import Product
from pharmacare.domain.model.value_objects import Money

logger = logging.getLogger(__name__)


class CartStore:

    def __init__(self, notifier: Notifier, cart: Cart | None = None) -> None:
        self._notifier = notifier
        self._cart = cart if cart is not None else Cart()

    @property
    def items(self) -> list[CartLine]:
        """Snapshot of the cart lines, in insertion order."""
        return list(self._cart.lines)

    # --- Commands -------------------------------------------------------------

    def add_to_cart(self, product: Product, quantity: int = 1) -> None:
        change = self._cart.add(product, quantity)
        logger.debug("add_to_cart %s x%d -> %s", product.id, quantity, change.value)

        if change is CartChange.UPDATED:
            self._notifier.notify(Notification(
                title="Produit mis à jour",
                description=f"Quantité de {product.name} mise à jour dans le panier",
            ))
        else:
            self._notifier.notify(Notification(
                title="Produit ajouté",
                description=f"{product.name} ajouté au panier",
            ))

    def remove_from_cart(self, product_id: str) -> None:
        removed = self._cart.remove(product_id)
        if removed is None:
            logger.debug("remove_from_cart %s: not in cart", product_id)
            return
        self._notifier.notify(Notification(
            title="Produit supprimé",
            description=f"{removed.product.name} supprimé du panier",
        ))

    def update_quantity(self, product_id: str, quantity: int) -> None:
        """Set a line's quantity; zero or less removes the line."""
        if quantity <= 0:
            self.remove_from_cart(product_id)
            return
        if not self._cart.set_quantity(product_id, quantity):
            logger.debug("update_quantity %s: not in cart", product_id)

    def clear_cart(self) -> None:
        self._cart.clear()
        self._notifier.notify(Notification(
            title="Panier vidé",
            description="Tous les produits ont été supprimés du panier",
        ))

    # --- Queries --------------------------------------------------------------

    def get_total_price(self) -> Money:
        return self._cart.total_price

    def get_total_items(self) -> int:
        return self._cart.total_items
