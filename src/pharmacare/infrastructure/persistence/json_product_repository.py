"""JSON-file-backed implementation of ProductRepository (read-only)."""

from __future__ import annotations

import json
from decimal import Decimal, InvalidOperation
from pathlib import Path

from pharmacare.domain.exceptions import ValidationError
from pharmacare.domain.model.product import Product
from pharmacare.domain.model.value_objects import DEFAULT_CURRENCY, Money
from pharmacare.domain.repository.product_repository import ProductRepository
from pharmacare.infrastructure.persistence.sample_catalog import SAMPLE_PRODUCTS


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file_path = file_path
        self._ensure_file()

    # --- ProductRepository interface ------------------------------------------

    def get_by_id(self, product_id: str) -> Product | None:
        return self._load().get(product_id)

    def list_all(self) -> list[Product]:
        return list(self._load().values())

    # --- Serialization helpers ------------------------------------------------

    def _load(self) -> dict[str, Product]:
        try:
            raw = json.loads(self._file_path.read_text(encoding="utf-8"))
            return {str(item["id"]): self._to_domain(item) for item in raw}
        except (ValueError, KeyError, TypeError, InvalidOperation) as exc:
            raise ValidationError(
                f"Catalog file {self._file_path} is malformed: {exc!r}"
            ) from exc

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=str(raw["id"]),
            name=raw["name"],
            price=Money.of(raw["price"], raw.get("currency", DEFAULT_CURRENCY)),
            description=raw.get("description", ""),
            category=raw.get("category", ""),
            image=raw.get("image", ""),
            in_stock=bool(raw.get("in_stock", 1)),
            rating=Decimal(str(raw.get("rating", "5.0"))),
            review_count=raw.get("review_count", 0),
        )

    def _ensure_file(self) -> None:
        if not self._file_path.exists():
            self._file_path.parent.mkdir(parents=True, exist_ok=True)
            self._file_path.write_text(
                json.dumps(SAMPLE_PRODUCTS, indent=2, ensure_ascii=False) + "\n",
                encoding="utf-8",
            )
