"""JSON-file-backed implementation of ProductRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from cubepos.domain.exceptions import EntityNotFoundError
from cubepos.domain.model.product import Product
from cubepos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from cubepos.domain.repository.product_repository import ProductRepository
from cubepos.infrastructure.persistence.json_file import JsonFile, upsert


class JsonProductRepository(ProductRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- ProductRepository interface ------------------------------------------

    def next_id(self) -> str:
        return self._file.next_id()

    def get_by_id(self, product_id: str) -> Product | None:
        for raw in self._file.load():
            if raw["id"] == product_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Product]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, product: Product) -> None:
        raw = self._to_raw(product)
        self._file.update(lambda records: upsert(records, raw))

    def update_aggregates(self, product_id: str, price: Money, stock: int) -> None:
        def apply(records: list[dict]) -> list[dict]:
            for raw in records:
                if raw["id"] == product_id:
                    raw["price"] = str(price.amount)
                    raw["currency"] = price.currency
                    raw["stock"] = stock
                    return records
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        # single file replace: both fields land together
        self._file.update(apply)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(product: Product) -> dict:
        return {
            "id": product.id,
            "name": product.name,
            "tenant_id": product.tenant_id,
            "category": product.category,
            "price": str(product.price.amount),
            "currency": product.price.currency,
            "stock": product.stock,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Product:
        return Product(
            id=raw["id"],
            name=raw["name"],
            tenant_id=raw["tenant_id"],
            category=raw.get("category", ""),
            price=Money(Decimal(raw.get("price", "0")), raw.get("currency", DEFAULT_CURRENCY)),
            stock=raw.get("stock", 0),
        )
