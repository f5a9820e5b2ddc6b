"""Product entity.

A product belongs to a tenant and owns zero or more variants.  Its
``price`` and ``stock`` are not authoritative: they cache the aggregate
of the current variant set and are rewritten whenever that set changes.
"""

from __future__ import annotations

from dataclasses import dataclass, field

from cubepos.domain.exceptions import ValidationError
from cubepos.domain.model.value_objects import Money


@dataclass
class Product:
    """A tenant's product in the catalog.

    Use ``Product.create()`` for new products.  ``price`` and ``stock``
    are only ever rewritten through
    ``ProductRepository.update_aggregates``.
    """

    id: str
    name: str
    tenant_id: str
    category: str = ""
    price: Money = field(default_factory=Money.zero)
    stock: int = 0

    @staticmethod
    def create(id: str, name: str, tenant_id: str, category: str = "") -> Product:
        """New products start with no variants, hence zeroed aggregates."""
        if not name or not name.strip():
            raise ValidationError("Product name is required")
        if not tenant_id or not tenant_id.strip():
            raise ValidationError("Product must belong to a tenant")
        return Product(
            id=id,
            name=name.strip(),
            tenant_id=tenant_id.strip(),
            category=category.strip(),
        )
