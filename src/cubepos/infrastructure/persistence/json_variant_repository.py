"""JSON-file-backed implementation of VariantRepository."""

from __future__ import annotations

from decimal import Decimal
from pathlib import Path

from cubepos.domain.exceptions import EntityNotFoundError
from cubepos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from cubepos.domain.model.variant import DEFAULT_LOW_STOCK_THRESHOLD, Variant
from cubepos.domain.repository.variant_repository import VariantRepository
from cubepos.infrastructure.persistence.json_file import JsonFile, upsert


class JsonVariantRepository(VariantRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- VariantRepository interface ------------------------------------------

    def next_id(self) -> str:
        return self._file.next_id()

    def get_by_id(self, variant_id: str) -> Variant | None:
        for raw in self._file.load():
            if raw["id"] == variant_id:
                return self._to_domain(raw)
        return None

    def find_by_product_id(self, product_id: str) -> list[Variant]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["product_id"] == product_id
        ]

    def list_all(self) -> list[Variant]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def save(self, variant: Variant) -> None:
        raw = self._to_raw(variant)
        self._file.update(lambda records: upsert(records, raw))

    def delete(self, variant_id: str) -> None:
        def remove(records: list[dict]) -> list[dict]:
            remaining = [raw for raw in records if raw["id"] != variant_id]
            if len(remaining) == len(records):
                raise EntityNotFoundError(f"Variant with ID '{variant_id}' not found")
            return remaining

        self._file.update(remove)

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(variant: Variant) -> dict:
        return {
            "id": variant.id,
            "product_id": variant.product_id,
            "sku": variant.sku,
            "size": variant.size,
            "color": variant.color,
            "barcode": variant.barcode,
            "price": str(variant.price.amount),
            "currency": variant.price.currency,
            "stock": variant.stock,
            "low_stock_threshold": variant.low_stock_threshold,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Variant:
        return Variant(
            id=raw["id"],
            product_id=raw["product_id"],
            sku=raw["sku"],
            price=Money(Decimal(raw["price"]), raw.get("currency", DEFAULT_CURRENCY)),
            stock=raw["stock"],
            size=raw.get("size"),
            color=raw.get("color"),
            barcode=raw.get("barcode"),
            low_stock_threshold=raw.get("low_stock_threshold", DEFAULT_LOW_STOCK_THRESHOLD),
        )
