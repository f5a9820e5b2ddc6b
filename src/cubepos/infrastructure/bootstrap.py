"""Composition root — wires concrete implementations to domain interfaces.

This is the only place in the codebase that knows about *all* layers.
Every other module depends only on abstractions.

Settings are rebuilt on every call, so tests can point the CLI
somewhere else with ``monkeypatch.setenv``.
"""

from __future__ import annotations

from datetime import date

from cubepos.infrastructure.clock import business_today
from cubepos.infrastructure.config import Settings
from cubepos.infrastructure.persistence.json_lease_repository import (
    JsonLeaseRepository,
)
from cubepos.infrastructure.persistence.json_product_repository import (
    JsonProductRepository,
)
from cubepos.infrastructure.persistence.json_variant_repository import (
    JsonVariantRepository,
)


def settings() -> Settings:
    return Settings()


def today() -> date:
    return business_today(settings().timezone)


def product_repository() -> JsonProductRepository:
    return JsonProductRepository(settings().data_dir / "products.json")


def variant_repository() -> JsonVariantRepository:
    return JsonVariantRepository(settings().data_dir / "variants.json")


def lease_repository() -> JsonLeaseRepository:
    return JsonLeaseRepository(settings().data_dir / "leases.json")
