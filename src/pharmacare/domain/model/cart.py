"""Cart aggregate: the products a shopper intends to buy.

The Cart owns its lines and enforces the line invariants. Its methods
only change state and report what happened; telling the shopper about
it is the application layer's job.
"""

from __future__ import annotations

from dataclasses import dataclass, field
from enum import Enum

from pharmacare.domain.model.product import Product
from pharmacare.domain.model.value_objects import Money, Quantity


class CartChange(Enum):
    ADDED = "ADDED"
    UPDATED = "UPDATED"


@dataclass
class CartLine:
    """One product's quantity entry within a cart."""

    product: Product
    quantity: Quantity

    @property
    def product_id(self) -> str:
        return self.product.id

    @property
    def line_total(self) -> Money:
        return self.product.price * self.quantity.value


@dataclass
class Cart:
    """Aggregate root for the shopping cart.

    Invariants:
    - at most one line per product id
    - every line has a positive quantity; a line that would drop to
      zero is removed instead
    - lines keep insertion order
    """

    lines: list[CartLine] = field(default_factory=list)

    # --- State transitions ----------------------------------------------------

    def add(self, product: Product, quantity: int = 1) -> CartChange:
        """Add *quantity* of *product*, merging into an existing line."""
        qty = Quantity(quantity)
        line = self.find_line(product.id)
        if line is not None:
            line.quantity = line.quantity + qty
            return CartChange.UPDATED
        self.lines.append(CartLine(product=product, quantity=qty))
        return CartChange.ADDED

    def remove(self, product_id: str) -> CartLine | None:
        """Drop the line for *product_id*; return it, or None if absent."""
        line = self.find_line(product_id)
        if line is not None:
            self.lines.remove(line)
        return line

    def set_quantity(self, product_id: str, quantity: int) -> bool:
        """Replace a line's quantity in place. Returns False if absent."""
        qty = Quantity(quantity)
        line = self.find_line(product_id)
        if line is None:
            return False
        line.quantity = qty
        return True

    def clear(self) -> None:
        self.lines.clear()

    # --- Computed properties --------------------------------------------------

    @property
    def total_price(self) -> Money:
        """Exact Decimal sum of line totals, rounded to cents afterwards."""
        if not self.lines:
            return Money.zero()
        result = Money.zero(self.lines[0].product.price.currency)
        for line in self.lines:
            result = result + line.line_total
        return result.rounded()

    @property
    def total_items(self) -> int:
        return sum(line.quantity.value for line in self.lines)

    @property
    def is_empty(self) -> bool:
        return not self.lines

    # --- Lookup ---------------------------------------------------------------

    def find_line(self, product_id: str) -> CartLine | None:
        for line in self.lines:
            if line.product_id == product_id:
                return line
        return None
