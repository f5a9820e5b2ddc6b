"""Application service: Update Variant use case."""

from __future__ import annotations

from cubepos.domain.exceptions import EntityNotFoundError, ValidationError
from cubepos.domain.model.value_objects import Money
from cubepos.domain.model.variant import Variant
from cubepos.domain.repository.product_repository import ProductRepository
from cubepos.domain.repository.variant_repository import VariantRepository
from cubepos.domain.service.product_aggregate_service import ProductAggregateService


class UpdateVariantHandler:

    def __init__(
        self,
        variant_repo: VariantRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._variant_repo = variant_repo
        self._product_repo = product_repo

    def handle(
        self,
        variant_id: str,
        price: str | None = None,
        stock: int | None = None,
    ) -> Variant:
        """Change a variant's price and/or stock.

        Submitting the values the variant already has is rejected, the
        same as submitting nothing.
        """
        variant = self._variant_repo.get_by_id(variant_id)
        if variant is None:
            raise EntityNotFoundError(f"Variant with ID '{variant_id}' not found")

        new_price = Money.of(price) if price is not None else None
        if not variant.update(price=new_price, stock=stock):
            raise ValidationError("No changes to apply")

        self._variant_repo.save(variant)
        ProductAggregateService(self._variant_repo, self._product_repo).recompute(
            variant.product_id
        )
        return variant
