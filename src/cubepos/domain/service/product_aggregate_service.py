"""Domain service: Product Aggregate recomputation.

Rebuilds a product's cached price and stock from its current variants.
Every variant create / update / delete goes through here, including
removal of the last variant, which collapses the product to zeros
instead of being forbidden.

The read (variants) and the write (product fields) are two separate
persistence calls.  Two recomputes of the same product racing each
other could otherwise let an older snapshot overwrite a newer one, so
recomputes are serialized per product id through a ``KeyedLock``.
That lock is in-process only; separate processes sharing a store need
the store's own transactions.
"""

from __future__ import annotations

import logging
import threading
from contextlib import contextmanager
from typing import Iterator

from cubepos.domain.model.aggregate import EmptyAggregate, ProductAggregate, aggregate_variants
from cubepos.domain.repository.product_repository import ProductRepository
from cubepos.domain.repository.variant_repository import VariantRepository

logger = logging.getLogger(__name__)


class KeyedLock:
    """One ``threading.Lock`` per key, created on first use.

    Entries are never evicted, so the map holds one lock per product id
    recomputed by this process.
    """

    def __init__(self) -> None:
        self._guard = threading.Lock()
        self._locks: dict[str, threading.Lock] = {}

    @contextmanager
    def hold(self, key: str) -> Iterator[None]:
        with self._guard:
            lock = self._locks.setdefault(key, threading.Lock())
        with lock:
            yield


# Shared by every service instance so handlers built per request still
# serialize against each other.
_product_locks = KeyedLock()


class ProductAggregateService:

    def __init__(
        self,
        variant_repo: VariantRepository,
        product_repo: ProductRepository,
        locks: KeyedLock | None = None,
    ) -> None:
        self._variant_repo = variant_repo
        self._product_repo = product_repo
        self._locks = locks if locks is not None else _product_locks

    def recompute(self, product_id: str) -> ProductAggregate:
        """Recompute and store the aggregate for *product_id*.

        One read of the variant set, one write of both product fields.
        Repository errors propagate untouched; if the read fails nothing
        is written.  Returns the aggregate that was stored.
        """
        with self._locks.hold(product_id):
            variants = self._variant_repo.find_by_product_id(product_id)
            aggregate = aggregate_variants(variants)

            if isinstance(aggregate, EmptyAggregate):
                logger.info("Product %s has no variants; zeroing aggregates", product_id)

            price, stock = aggregate.as_fields()
            self._product_repo.update_aggregates(product_id, price, stock)

        logger.info(
            "Recomputed product %s from %d variant(s): price=%s stock=%d",
            product_id, len(variants), price, stock,
        )
        return aggregate
