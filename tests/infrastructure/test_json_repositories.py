"""Tests for the JSON-file repositories."""

import json
import threading
import time
from datetime import date

import pytest

from cubepos.domain.exceptions import EntityNotFoundError
from cubepos.domain.model.lease import Lease
from cubepos.domain.model.product import Product
from cubepos.domain.model.value_objects import Money
from cubepos.domain.model.variant import Variant
from cubepos.domain.service.product_aggregate_service import ProductAggregateService
from cubepos.infrastructure.persistence.json_lease_repository import JsonLeaseRepository
from cubepos.infrastructure.persistence.json_product_repository import JsonProductRepository
from cubepos.infrastructure.persistence.json_variant_repository import JsonVariantRepository


class TestJsonProductRepository:

    def test_creates_missing_file(self, tmp_path):
        path = tmp_path / "nested" / "products.json"
        JsonProductRepository(path)
        assert json.loads(path.read_text()) == []

    def test_save_and_reload(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="1", name="Tee", tenant_id="t1", category="Apparel"))

        loaded = JsonProductRepository(tmp_path / "products.json").get_by_id("1")
        assert loaded == Product(id="1", name="Tee", tenant_id="t1", category="Apparel")

    def test_next_id(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        assert repo.next_id() == "1"
        repo.save(Product(id="9", name="Tee", tenant_id="t1"))
        assert repo.next_id() == "10"

    def test_update_aggregates_writes_both_fields(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="1", name="Tee", tenant_id="t1"))

        repo.update_aggregates("1", Money.of("7.50"), 8)

        raw = json.loads((tmp_path / "products.json").read_text())[0]
        assert raw["price"] == "7.50"
        assert raw["stock"] == 8
        assert raw["name"] == "Tee"

    def test_update_aggregates_unknown_product(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="1", name="Tee", tenant_id="t1"))
        before = (tmp_path / "products.json").read_text()

        with pytest.raises(EntityNotFoundError):
            repo.update_aggregates("2", Money.of("1"), 1)
        assert (tmp_path / "products.json").read_text() == before

    def test_no_temp_files_left_behind(self, tmp_path):
        repo = JsonProductRepository(tmp_path / "products.json")
        repo.save(Product(id="1", name="Tee", tenant_id="t1"))
        repo.update_aggregates("1", Money.of("2"), 2)
        assert [p.name for p in tmp_path.iterdir()] == ["products.json"]


class TestJsonVariantRepository:

    def _variant(self, id, product_id="1", price="10", stock=5):
        return Variant(
            id=id, product_id=product_id, sku=f"SKU-{id}",
            price=Money.of(price), stock=stock, size="M", color="Black",
        )

    def test_find_by_product_id(self, tmp_path):
        repo = JsonVariantRepository(tmp_path / "variants.json")
        repo.save(self._variant("1"))
        repo.save(self._variant("2", product_id="2"))
        repo.save(self._variant("3"))

        assert sorted(v.id for v in repo.find_by_product_id("1")) == ["1", "3"]
        assert repo.find_by_product_id("404") == []

    def test_round_trip_keeps_fields(self, tmp_path):
        repo = JsonVariantRepository(tmp_path / "variants.json")
        original = self._variant("1", price="12.95", stock=3)
        repo.save(original)
        assert repo.get_by_id("1") == original

    def test_save_replaces_existing(self, tmp_path):
        repo = JsonVariantRepository(tmp_path / "variants.json")
        repo.save(self._variant("1", stock=5))
        repo.save(self._variant("1", stock=2))
        assert len(repo.list_all()) == 1
        assert repo.get_by_id("1").stock == 2

    def test_delete(self, tmp_path):
        repo = JsonVariantRepository(tmp_path / "variants.json")
        repo.save(self._variant("1"))
        repo.delete("1")
        assert repo.get_by_id("1") is None

    def test_delete_unknown(self, tmp_path):
        repo = JsonVariantRepository(tmp_path / "variants.json")
        with pytest.raises(EntityNotFoundError):
            repo.delete("1")


class TestJsonLeaseRepository:

    def test_round_trip_and_filter(self, tmp_path):
        repo = JsonLeaseRepository(tmp_path / "leases.json")
        lease = Lease(
            id="1", tenant_id="t1", tenant_name="Alice", cube_id="C4",
            start_date=date(2025, 1, 1), end_date=date(2025, 12, 31),
            daily_rent=Money.of("25.00"),
        )
        repo.save(lease)

        raw = json.loads((tmp_path / "leases.json").read_text())[0]
        assert raw["start_date"] == "2025-01-01"
        assert repo.get_by_id("1") == lease
        assert repo.list_by_tenant("t1") == [lease]
        assert repo.list_by_tenant("t2") == []


class TestRecomputeAgainstJsonStore:

    def test_recompute_and_last_variant_removal(self, tmp_path):
        products = JsonProductRepository(tmp_path / "products.json")
        variants = JsonVariantRepository(tmp_path / "variants.json")
        products.save(Product(id="1", name="Tee", tenant_id="t1"))
        variants.save(Variant(id="1", product_id="1", sku="A", price=Money.of("10"), stock=5))
        variants.save(Variant(id="2", product_id="1", sku="B", price=Money.of("7"), stock=3))
        svc = ProductAggregateService(variants, products)

        svc.recompute("1")
        assert products.get_by_id("1").price == Money.of("7")
        assert products.get_by_id("1").stock == 8

        variants.delete("1")
        variants.delete("2")
        svc.recompute("1")
        assert products.get_by_id("1").price == Money.zero()
        assert products.get_by_id("1").stock == 0


class TestConcurrentWrites:

    def _slow_loads(self, repo, monkeypatch):
        # hold every reader just after it has read the file
        original = repo._file.load

        def load():
            records = original()
            time.sleep(0.05)
            return records

        monkeypatch.setattr(repo._file, "load", load)

    def _run_together(self, *targets):
        errors = []

        def wrap(fn):
            try:
                fn()
            except Exception as exc:  # surfaced by the assertion below
                errors.append(exc)

        threads = [threading.Thread(target=wrap, args=(fn,)) for fn in targets]
        for t in threads:
            t.start()
        for t in threads:
            t.join(timeout=10)
        assert errors == []

    def test_recomputing_two_products_keeps_both(self, tmp_path, monkeypatch):
        path = tmp_path / "products.json"
        variants = JsonVariantRepository(tmp_path / "variants.json")
        JsonProductRepository(path).save(Product(id="1", name="Tee", tenant_id="t1"))
        JsonProductRepository(path).save(Product(id="2", name="Mug", tenant_id="t1"))
        variants.save(Variant(id="1", product_id="1", sku="A", price=Money.of("10"), stock=5))
        variants.save(Variant(id="2", product_id="2", sku="B", price=Money.of("3"), stock=7))

        # separate repository objects, as each CLI call builds its own
        first, second = JsonProductRepository(path), JsonProductRepository(path)
        self._slow_loads(first, monkeypatch)
        self._slow_loads(second, monkeypatch)

        self._run_together(
            lambda: ProductAggregateService(variants, first).recompute("1"),
            lambda: ProductAggregateService(variants, second).recompute("2"),
        )

        stored = JsonProductRepository(path)
        assert (stored.get_by_id("1").price, stored.get_by_id("1").stock) == (Money.of("10"), 5)
        assert (stored.get_by_id("2").price, stored.get_by_id("2").stock) == (Money.of("3"), 7)

    def test_parallel_variant_saves_are_all_kept(self, tmp_path, monkeypatch):
        path = tmp_path / "variants.json"
        repos = [JsonVariantRepository(path) for _ in range(4)]
        for repo in repos:
            self._slow_loads(repo, monkeypatch)

        self._run_together(*[
            (lambda repo=repo, i=i: repo.save(
                Variant(id=str(i), product_id="1", sku=f"S{i}", price=Money.of("1"), stock=i)
            ))
            for i, repo in enumerate(repos, start=1)
        ])

        assert sorted(v.id for v in JsonVariantRepository(path).list_all()) == ["1", "2", "3", "4"]
