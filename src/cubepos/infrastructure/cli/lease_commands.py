"""CLI commands for cube leases."""

from __future__ import annotations

from datetime import date, datetime

import click

from cubepos.application.add_lease import AddLeaseHandler
from cubepos.application.show_leases import ShowLeasesHandler
from cubepos.application.tenant_status import TenantStatusHandler
from cubepos.domain.exceptions import DomainException
from cubepos.infrastructure.bootstrap import lease_repository, today

_DATE = click.DateTime(formats=["%Y-%m-%d"])


def _as_of(on: datetime | None) -> date:
    """Evaluation date: ``--on`` if given, else today in the business zone."""
    return on.date() if on is not None else today()


@click.command("add")
@click.option("--tenant", "tenant_id", required=True, help="Tenant ID.")
@click.option("--tenant-name", default="", help="Tenant display name.")
@click.option("--cube", "cube_id", required=True, help="Cube ID (e.g. C1).")
@click.option("--start", "start", required=True, type=_DATE, help="First day (YYYY-MM-DD).")
@click.option("--end", "end", required=True, type=_DATE, help="Last day (YYYY-MM-DD).")
@click.option("--daily-rent", required=True, help="Rent per day (e.g. 25.00).")
def lease_add(
    tenant_id: str,
    tenant_name: str,
    cube_id: str,
    start: datetime,
    end: datetime,
    daily_rent: str,
) -> None:
    """Record a new cube lease."""
    handler = AddLeaseHandler(lease_repo=lease_repository())

    try:
        lease = handler.handle(
            tenant_id=tenant_id,
            tenant_name=tenant_name,
            cube_id=cube_id,
            start_date=start.date(),
            end_date=end.date(),
            daily_rent=daily_rent,
        )
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(
        f"Lease #{lease.id} for tenant {lease.tenant_id} on cube {lease.cube_id}: "
        f"{lease.start_date.isoformat()} to {lease.end_date.isoformat()} "
        f"({lease.duration_days} days at {lease.daily_rent}/day)"
    )


@click.command("list")
@click.option("--tenant", "tenant_id", default=None, help="Only this tenant's leases.")
@click.option("--on", type=_DATE, default=None, help="Evaluate status on this date.")
def lease_list(tenant_id: str | None, on: datetime | None) -> None:
    """List leases with their current status."""
    as_of = _as_of(on)
    lines = ShowLeasesHandler(lease_repo=lease_repository()).handle(as_of, tenant_id)

    if not lines:
        click.echo("No leases found.")
        return

    click.echo(f"Status as of {as_of.isoformat()}")
    click.echo(
        f"{'ID':<5} {'Tenant':<18} {'Cube':<6} {'Start':<11} {'End':<11} {'Rent/day':>9}  Status"
    )
    click.echo("-" * 72)
    for line in lines:
        who = line.tenant_name or line.tenant_id
        click.echo(
            f"{line.id:<5} {who:<18} {line.cube_id:<6} {line.start_date:<11} "
            f"{line.end_date:<11} {line.daily_rent:>9}  {line.status}"
        )


@click.command("tenant-status")
@click.option("--tenant", "tenant_id", required=True, help="Tenant ID.")
@click.option("--on", type=_DATE, default=None, help="Evaluate status on this date.")
def lease_tenant_status(tenant_id: str, on: datetime | None) -> None:
    """Show a tenant's overall lease status."""
    status = TenantStatusHandler(lease_repo=lease_repository()).handle(tenant_id, _as_of(on))
    click.echo(f"Tenant {tenant_id}: {status.value}")
