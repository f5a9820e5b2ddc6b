"""Application service: Show Product use case (query)."""

from __future__ import annotations

from cubepos.application.dto import ProductDTO, VariantDTO
from cubepos.domain.exceptions import EntityNotFoundError
from cubepos.domain.model.product import Product
from cubepos.domain.model.variant import Variant
from cubepos.domain.repository.product_repository import ProductRepository
from cubepos.domain.repository.variant_repository import VariantRepository


class ShowProductHandler:

    def __init__(
        self,
        product_repo: ProductRepository,
        variant_repo: VariantRepository,
    ) -> None:
        self._product_repo = product_repo
        self._variant_repo = variant_repo

    def handle(self, product_id: str) -> ProductDTO:
        product = self._product_repo.get_by_id(product_id)
        if product is None:
            raise EntityNotFoundError(f"Product with ID '{product_id}' not found")
        variants = self._variant_repo.find_by_product_id(product_id)
        return self._to_dto(product, variants)

    @staticmethod
    def _to_dto(product: Product, variants: list[Variant]) -> ProductDTO:
        return ProductDTO(
            id=product.id,
            name=product.name,
            tenant_id=product.tenant_id,
            category=product.category,
            price=str(product.price),
            stock=product.stock,
            variants=[
                VariantDTO(
                    id=v.id,
                    sku=v.sku,
                    size=v.size,
                    color=v.color,
                    price=str(v.price),
                    stock=v.stock,
                    stock_status=v.stock_status.value,
                )
                for v in sorted(variants, key=lambda v: v.sku)
            ],
        )
