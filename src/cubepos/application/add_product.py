"""Application service: Add Product use case."""

from __future__ import annotations

from cubepos.domain.model.product import Product
from cubepos.domain.repository.product_repository import ProductRepository


class AddProductHandler:

    def __init__(self, product_repo: ProductRepository) -> None:
        self._product_repo = product_repo

    def handle(self, name: str, tenant_id: str, category: str = "") -> Product:
        """Add a product with no variants yet (price and stock are zero)."""
        product = Product.create(
            id=self._product_repo.next_id(),
            name=name,
            tenant_id=tenant_id,
            category=category,
        )
        self._product_repo.save(product)
        return product
