"""Variant entity — a priced, stocked unit of a product.

A variant is one sellable SKU (a size/colour combination, say) of a
product. Variants are the source of truth for price and stock; the
product only caches an aggregate of them.
"""

from __future__ import annotations

from dataclasses import dataclass
from enum import Enum

from cubepos.domain.exceptions import ValidationError
from cubepos.domain.model.value_objects import Money

DEFAULT_LOW_STOCK_THRESHOLD = 5


class StockStatus(Enum):
    OUT = "out"
    LOW = "low"
    NORMAL = "normal"


@dataclass
class Variant:
    """A single SKU of a product.

    Use ``Variant.create()`` for new variants.  ``__init__`` accepts
    whatever the repository hands it without re-validating.
    """

    id: str
    product_id: str
    sku: str
    price: Money
    stock: int
    size: str | None = None
    color: str | None = None
    barcode: str | None = None
    low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD

    @staticmethod
    def create(
        id: str,
        product_id: str,
        sku: str,
        price: Money,
        stock: int,
        size: str | None = None,
        color: str | None = None,
        barcode: str | None = None,
        low_stock_threshold: int = DEFAULT_LOW_STOCK_THRESHOLD,
    ) -> Variant:
        if not sku or not sku.strip():
            raise ValidationError("Variant SKU is required")
        _check_stock(stock)
        if not isinstance(low_stock_threshold, int) or low_stock_threshold < 0:
            raise ValidationError("Low stock threshold must be a non-negative integer")
        return Variant(
            id=id,
            product_id=product_id,
            sku=sku.strip(),
            price=price,
            stock=stock,
            size=size,
            color=color,
            barcode=barcode,
            low_stock_threshold=low_stock_threshold,
        )

    @property
    def stock_status(self) -> StockStatus:
        if self.stock == 0:
            return StockStatus.OUT
        if self.stock <= self.low_stock_threshold:
            return StockStatus.LOW
        return StockStatus.NORMAL

    def update(self, price: Money | None = None, stock: int | None = None) -> bool:
        """Apply a price and/or stock change.

        Returns True if anything actually changed.  Values equal to the
        current ones are ignored.
        """
        if stock is not None:
            _check_stock(stock)

        changed = False
        if price is not None and price != self.price:
            self.price = price
            changed = True
        if stock is not None and stock != self.stock:
            self.stock = stock
            changed = True
        return changed


def _check_stock(stock: int) -> None:
    # bool is an int subclass; True is not a stock level
    if not isinstance(stock, int) or isinstance(stock, bool):
        raise ValidationError(f"Stock must be an integer, got {type(stock).__name__}")
    if stock < 0:
        raise ValidationError(f"Stock cannot be negative, got {stock}")
