"""Data Transfer Objects — plain containers that cross layer boundaries.

DTOs carry data between the CLI and application layers without
exposing domain internals to the outside world.
"""

from __future__ import annotations

from dataclasses import dataclass


@dataclass(frozen=True)
class VariantDTO:
    id: str
    sku: str
    size: str | None
    color: str | None
    price: str  # formatted, e.g. "$15.00"
    stock: int
    stock_status: str


@dataclass(frozen=True)
class ProductDTO:
    """A product together with the variants its aggregate was built from."""

    id: str
    name: str
    tenant_id: str
    category: str
    price: str
    stock: int
    variants: list[VariantDTO]

    @property
    def has_variants(self) -> bool:
        return bool(self.variants)


@dataclass(frozen=True)
class LeaseDTO:
    """A lease with its status as of the evaluation date."""

    id: str
    tenant_id: str
    tenant_name: str
    cube_id: str
    start_date: str  # ISO, e.g. "2025-01-01"
    end_date: str
    daily_rent: str
    status: str
