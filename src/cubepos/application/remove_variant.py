"""Application service: Remove Variant use case.

Removing a product's last variant is allowed.  The product stays in
the catalog with its price and stock collapsed to zero.
"""

from __future__ import annotations

from cubepos.domain.exceptions import EntityNotFoundError
from cubepos.domain.repository.product_repository import ProductRepository
from cubepos.domain.repository.variant_repository import VariantRepository
from cubepos.domain.service.product_aggregate_service import ProductAggregateService


class RemoveVariantHandler:

    def __init__(
        self,
        variant_repo: VariantRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._variant_repo = variant_repo
        self._product_repo = product_repo

    def handle(self, variant_id: str) -> None:
        variant = self._variant_repo.get_by_id(variant_id)
        if variant is None:
            raise EntityNotFoundError(f"Variant with ID '{variant_id}' not found")

        self._variant_repo.delete(variant_id)
        ProductAggregateService(self._variant_repo, self._product_repo).recompute(
            variant.product_id
        )
