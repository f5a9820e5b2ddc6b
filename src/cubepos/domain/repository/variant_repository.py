"""Abstract repository for the Variant entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cubepos.domain.model.variant import Variant


class VariantRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique variant ID."""

    @abstractmethod
    def get_by_id(self, variant_id: str) -> Variant | None:
        """Return a variant by its ID, or None if not found."""

    @abstractmethod
    def find_by_product_id(self, product_id: str) -> list[Variant]:
        """Return every variant currently attached to a product, in any order."""

    @abstractmethod
    def list_all(self) -> list[Variant]:
        """Return every variant."""

    @abstractmethod
    def save(self, variant: Variant) -> None:
        """Persist a new or updated variant."""

    @abstractmethod
    def delete(self, variant_id: str) -> None:
        """Remove a variant.  Raises EntityNotFoundError if it does not exist."""
