"""Application service: Recompute Product use case.

Used to repair a product whose cached aggregate drifted, e.g. after
variants were edited outside the application.
"""

from __future__ import annotations

from cubepos.domain.exceptions import EntityNotFoundError
from cubepos.domain.model.aggregate import ProductAggregate
from cubepos.domain.repository.product_repository import ProductRepository
from cubepos.domain.repository.variant_repository import VariantRepository
from cubepos.domain.service.product_aggregate_service import ProductAggregateService


class RecomputeProductHandler:

    def __init__(
        self,
        variant_repo: VariantRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._variant_repo = variant_repo
        self._product_repo = product_repo

    def handle(self, product_id: str) -> ProductAggregate:
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        svc = ProductAggregateService(self._variant_repo, self._product_repo)
        return svc.recompute(product_id)
