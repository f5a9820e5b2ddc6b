"""Abstract repository for the Lease entity."""

from __future__ import annotations

from abc import ABC, abstractmethod

from cubepos.domain.model.lease import Lease


class LeaseRepository(ABC):

    @abstractmethod
    def next_id(self) -> str:
        """Generate the next unique lease ID."""

    @abstractmethod
    def get_by_id(self, lease_id: str) -> Lease | None:
        """Return a lease by its ID, or None if not found."""

    @abstractmethod
    def list_all(self) -> list[Lease]:
        """Return every lease."""

    @abstractmethod
    def list_by_tenant(self, tenant_id: str) -> list[Lease]:
        """Return all leases held by a tenant."""

    @abstractmethod
    def save(self, lease: Lease) -> None:
        """Persist a new or updated lease."""
