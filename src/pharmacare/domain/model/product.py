"""Product record, as supplied by the catalog.

The cart and favorites only ever read products; they are keyed by
``id`` and never mutated here, so the dataclass is frozen.
"""

from __future__ import annotations

from dataclasses import dataclass
from decimal import Decimal

from pharmacare.domain.model.value_objects import Money


@dataclass(frozen=True)
class Product:

    id: str
    name: str
    price: Money
    description: str = ""
    category: str = ""
    image: str = ""
    in_stock: bool = True
    rating: Decimal = Decimal("5.0")
    review_count: int = 0
