"""FavoriteSet: product ids the shopper has marked as liked."""

from __future__ import annotations

from dataclasses import dataclass, field


@dataclass
class FavoriteSet:
    """Ordered set of product ids (first liked stays first).

    Every transition returns True only when membership actually changed.
    """

    product_ids: list[str] = field(default_factory=list)

    def __post_init__(self) -> None:
        # Collapse duplicates from persisted data, keeping first occurrence.
        self.product_ids = list(dict.fromkeys(self.product_ids))

    def __contains__(self, product_id: str) -> bool:
        return product_id in self.product_ids

    def __len__(self) -> int:
        return len(self.product_ids)

    def add(self, product_id: str) -> bool:
        if product_id in self.product_ids:
            return False
        self.product_ids.append(product_id)
        return True

    def remove(self, product_id: str) -> bool:
        if product_id not in self.product_ids:
            return False
        self.product_ids.remove(product_id)
        return True

    def toggle(self, product_id: str) -> bool:
        """Invert membership. Returns True if *product_id* is now a favorite."""
        if self.remove(product_id):
            return False
        self.add(product_id)
        return True
