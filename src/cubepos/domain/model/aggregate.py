"""Product aggregate derived from a variant set.

A product's price and stock are a pure function of its variants:
the cheapest variant price and the total stock across variants.
"No variants" is modelled as its own case, ``EmptyAggregate``, and is
only turned into zero fields by ``as_fields()`` at the storage
boundary, so it is never confused with a product priced at zero.
"""

from __future__ import annotations

from dataclasses import dataclass
from typing import Iterable, Protocol, Union

from cubepos.domain.model.value_objects import Money


class PricedStock(Protocol):
    """Anything carrying a price and a stock level (variants, records)."""

    price: Money
    stock: int


@dataclass(frozen=True)
class EmptyAggregate:
    """The product currently has no variants."""

    def as_fields(self) -> tuple[Money, int]:
        return Money.zero(), 0


@dataclass(frozen=True)
class ComputedAggregate:
    price: Money
    stock: int

    def as_fields(self) -> tuple[Money, int]:
        return self.price, self.stock


ProductAggregate = Union[EmptyAggregate, ComputedAggregate]


def aggregate_variants(variants: Iterable[PricedStock]) -> ProductAggregate:
    """Compute min price and total stock over *variants*.

    Input order is irrelevant.  When several variants share the minimum
    price, which one "wins" does not matter; only the value is kept.
    """
    variants = list(variants)
    if not variants:
        return EmptyAggregate()

    min_price = min(v.price for v in variants)
    total_stock = sum(v.stock for v in variants)
    return ComputedAggregate(price=min_price, stock=total_stock)
