"""Application service: Add Lease use case."""

from __future__ import annotations

from datetime import date

from cubepos.domain.model.lease import Lease
from cubepos.domain.model.value_objects import Money
from cubepos.domain.repository.lease_repository import LeaseRepository


class AddLeaseHandler:

    def __init__(self, lease_repo: LeaseRepository) -> None:
        self._lease_repo = lease_repo

    def handle(
        self,
        tenant_id: str,
        tenant_name: str,
        cube_id: str,
        start_date: date,
        end_date: date,
        daily_rent: str,
    ) -> Lease:
        lease = Lease.create(
            id=self._lease_repo.next_id(),
            tenant_id=tenant_id,
            tenant_name=tenant_name,
            cube_id=cube_id,
            start_date=start_date,
            end_date=end_date,
            daily_rent=Money.of(daily_rent),
        )
        self._lease_repo.save(lease)
        return lease
