"""Application service: Tenant Status use case (query)."""

from __future__ import annotations

from datetime import date

from cubepos.domain.model.lease import TenantStatus, tenant_status
from cubepos.domain.repository.lease_repository import LeaseRepository


class TenantStatusHandler:

    def __init__(self, lease_repo: LeaseRepository) -> None:
        self._lease_repo = lease_repo

    def handle(self, tenant_id: str, now: date) -> TenantStatus:
        return tenant_status(self._lease_repo.list_by_tenant(tenant_id), now)
