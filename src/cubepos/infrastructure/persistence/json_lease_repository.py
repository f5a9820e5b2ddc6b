"""JSON-file-backed implementation of LeaseRepository."""

from __future__ import annotations

from datetime import date
from decimal import Decimal
from pathlib import Path

from cubepos.domain.model.lease import Lease
from cubepos.domain.model.value_objects import DEFAULT_CURRENCY, Money
from cubepos.domain.repository.lease_repository import LeaseRepository
from cubepos.infrastructure.persistence.json_file import JsonFile, upsert


class JsonLeaseRepository(LeaseRepository):

    def __init__(self, file_path: Path) -> None:
        self._file = JsonFile(file_path)

    # --- LeaseRepository interface --------------------------------------------

    def next_id(self) -> str:
        return self._file.next_id()

    def get_by_id(self, lease_id: str) -> Lease | None:
        for raw in self._file.load():
            if raw["id"] == lease_id:
                return self._to_domain(raw)
        return None

    def list_all(self) -> list[Lease]:
        return [self._to_domain(raw) for raw in self._file.load()]

    def list_by_tenant(self, tenant_id: str) -> list[Lease]:
        return [
            self._to_domain(raw)
            for raw in self._file.load()
            if raw["tenant_id"] == tenant_id
        ]

    def save(self, lease: Lease) -> None:
        raw = self._to_raw(lease)
        self._file.update(lambda records: upsert(records, raw))

    # --- Serialization --------------------------------------------------------

    @staticmethod
    def _to_raw(lease: Lease) -> dict:
        return {
            "id": lease.id,
            "tenant_id": lease.tenant_id,
            "tenant_name": lease.tenant_name,
            "cube_id": lease.cube_id,
            "start_date": lease.start_date.isoformat(),
            "end_date": lease.end_date.isoformat(),
            "daily_rent": str(lease.daily_rent.amount),
            "currency": lease.daily_rent.currency,
        }

    @staticmethod
    def _to_domain(raw: dict) -> Lease:
        return Lease(
            id=raw["id"],
            tenant_id=raw["tenant_id"],
            tenant_name=raw.get("tenant_name", ""),
            cube_id=raw["cube_id"],
            start_date=date.fromisoformat(raw["start_date"]),
            end_date=date.fromisoformat(raw["end_date"]),
            daily_rent=Money(Decimal(raw["daily_rent"]), raw.get("currency", DEFAULT_CURRENCY)),
        )
