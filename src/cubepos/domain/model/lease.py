"""Lease entity and the lease status rules.

A lease is a tenant's rental of a cube between two calendar dates.
Status is never stored: it is derived from the dates and a reference
"now" every time it is asked for.
"""

from __future__ import annotations

from dataclasses import dataclass
from datetime import date, datetime
from enum import Enum
from typing import Iterable

from cubepos.domain.exceptions import ValidationError
from cubepos.domain.model.value_objects import Money


class LeaseStatus(Enum):
    UPCOMING = "Upcoming"
    ACTIVE = "Active"
    EXPIRED = "Expired"


class TenantStatus(Enum):
    AVAILABLE = "Available"
    UPCOMING = "Upcoming"
    ACTIVE = "Active"
    EXPIRED = "Expired"


def classify_lease(start_date: date, end_date: date, now: date | datetime) -> LeaseStatus:
    """Classify a lease period relative to *now*.

    Both ``start_date`` and ``end_date`` count as Active days.  A
    ``datetime`` is reduced to its calendar date first; convert it to
    the business time zone before calling if that matters.

    ``start_date <= end_date`` is assumed, not checked.
    """
    if isinstance(now, datetime):
        now = now.date()
    if now < start_date:
        return LeaseStatus.UPCOMING
    if now > end_date:
        return LeaseStatus.EXPIRED
    return LeaseStatus.ACTIVE


@dataclass
class Lease:
    """A tenant's rental of a cube.

    ``Lease.create()`` validates the date range; the classifier itself
    trusts it.
    """

    id: str
    tenant_id: str
    tenant_name: str
    cube_id: str
    start_date: date
    end_date: date
    daily_rent: Money

    @staticmethod
    def create(
        id: str,
        tenant_id: str,
        tenant_name: str,
        cube_id: str,
        start_date: date,
        end_date: date,
        daily_rent: Money,
    ) -> Lease:
        if not tenant_id or not tenant_id.strip():
            raise ValidationError("Tenant ID is required")
        if not cube_id or not cube_id.strip():
            raise ValidationError("Cube ID is required")
        if end_date < start_date:
            raise ValidationError(
                f"Lease end date {end_date.isoformat()} is before "
                f"start date {start_date.isoformat()}"
            )
        return Lease(
            id=id,
            tenant_id=tenant_id.strip(),
            tenant_name=(tenant_name or "").strip(),
            cube_id=cube_id.strip(),
            start_date=start_date,
            end_date=end_date,
            daily_rent=daily_rent,
        )

    def status(self, now: date | datetime) -> LeaseStatus:
        return classify_lease(self.start_date, self.end_date, now)

    @property
    def duration_days(self) -> int:
        """Number of rented days, both ends inclusive."""
        return (self.end_date - self.start_date).days + 1


def tenant_status(leases: Iterable[Lease], now: date | datetime) -> TenantStatus:
    """Summarise a tenant's leases into a single status at *now*.

    A tenant with no leases is Available.  Otherwise any lease active at
    *now* makes the tenant Active; failing that any lease yet to start
    makes them Upcoming; only a tenant whose leases have all ended is
    Expired.
    """
    by_status: dict[LeaseStatus, list[Lease]] = {s: [] for s in LeaseStatus}
    for lease in leases:
        by_status[lease.status(now)].append(lease)

    if by_status[LeaseStatus.ACTIVE]:
        return TenantStatus.ACTIVE
    if by_status[LeaseStatus.UPCOMING]:
        return TenantStatus.UPCOMING
    if by_status[LeaseStatus.EXPIRED]:
        return TenantStatus.EXPIRED
    return TenantStatus.AVAILABLE
