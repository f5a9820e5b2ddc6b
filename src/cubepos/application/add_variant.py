"""Application service: Add Variant use case."""

from __future__ import annotations

from cubepos.domain.exceptions import EntityNotFoundError, ValidationError
from cubepos.domain.model.value_objects import Money
from cubepos.domain.model.variant import Variant
from cubepos.domain.repository.product_repository import ProductRepository
from cubepos.domain.repository.variant_repository import VariantRepository
from cubepos.domain.service.product_aggregate_service import ProductAggregateService


class AddVariantHandler:

    def __init__(
        self,
        variant_repo: VariantRepository,
        product_repo: ProductRepository,
    ) -> None:
        self._variant_repo = variant_repo
        self._product_repo = product_repo

    def handle(
        self,
        product_id: str,
        sku: str,
        price: str,
        stock: int,
        size: str | None = None,
        color: str | None = None,
        barcode: str | None = None,
    ) -> Variant:
        """Attach a new variant to a product and refresh its aggregate."""
        if self._product_repo.get_by_id(product_id) is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")

        self._check_unique(product_id, sku, size, color, barcode)

        variant = Variant.create(
            id=self._variant_repo.next_id(),
            product_id=product_id,
            sku=sku,
            price=Money.of(price),
            stock=stock,
            size=size,
            color=color,
            barcode=barcode,
        )
        self._variant_repo.save(variant)

        ProductAggregateService(self._variant_repo, self._product_repo).recompute(product_id)
        return variant

    def _check_unique(
        self,
        product_id: str,
        sku: str,
        size: str | None,
        color: str | None,
        barcode: str | None,
    ) -> None:
        """SKU and size+colour are unique per product; barcodes are unique everywhere.

        A variant with neither size nor colour does not take part in the
        size+colour rule.
        """
        siblings = self._variant_repo.find_by_product_id(product_id)

        if any(v.sku.lower() == sku.strip().lower() for v in siblings):
            raise ValidationError(f"SKU '{sku.strip()}' already exists on this product")

        if size is not None or color is not None:
            combo = _size_color_key(size, color)
            if any(
                (v.size is not None or v.color is not None)
                and _size_color_key(v.size, v.color) == combo
                for v in siblings
            ):
                raise ValidationError(
                    f"A variant with size '{size or '-'}' and color '{color or '-'}' "
                    f"already exists on this product"
                )

        if barcode is not None:
            if any(v.barcode == barcode for v in self._variant_repo.list_all()):
                raise ValidationError(f"Barcode '{barcode}' is already in use")


def _size_color_key(size: str | None, color: str | None) -> tuple[str, str]:
    return (size or "").strip().lower(), (color or "").strip().lower()
