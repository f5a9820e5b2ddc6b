"""Application service: Show Leases use case (query).

Statuses are computed for the ``now`` passed in and are only valid for
that instant; nothing here caches them.
"""

from __future__ import annotations

from datetime import date

from cubepos.application.dto import LeaseDTO
from cubepos.domain.model.lease import Lease
from cubepos.domain.repository.lease_repository import LeaseRepository


class ShowLeasesHandler:

    def __init__(self, lease_repo: LeaseRepository) -> None:
        self._lease_repo = lease_repo

    def handle(self, now: date, tenant_id: str | None = None) -> list[LeaseDTO]:
        if tenant_id is None:
            leases = self._lease_repo.list_all()
        else:
            leases = self._lease_repo.list_by_tenant(tenant_id)
        leases = sorted(leases, key=lambda lease: (lease.start_date, lease.id))
        return [self._to_dto(lease, now) for lease in leases]

    @staticmethod
    def _to_dto(lease: Lease, now: date) -> LeaseDTO:
        return LeaseDTO(
            id=lease.id,
            tenant_id=lease.tenant_id,
            tenant_name=lease.tenant_name,
            cube_id=lease.cube_id,
            start_date=lease.start_date.isoformat(),
            end_date=lease.end_date.isoformat(),
            daily_rent=str(lease.daily_rent),
            status=lease.status(now).value,
        )
