import logging

import click

from cubepos.infrastructure.cli.lease_commands import (
    lease_add,
    lease_list,
    lease_tenant_status,
)
from cubepos.infrastructure.cli.product_commands import (
    product_add,
    product_list,
    product_recompute,
    product_show,
)
from cubepos.infrastructure.cli.variant_commands import (
    variant_add,
    variant_remove,
    variant_update,
)


@click.group()
@click.option("-v", "--verbose", is_flag=True, help="Log debug output to stderr.")
def cli(verbose: bool) -> None:
    """cubepos — product aggregates and cube leases"""
    logging.basicConfig(
        level=logging.DEBUG if verbose else logging.WARNING,
        format="%(asctime)s %(levelname)s %(name)s: %(message)s",
    )


@cli.group()
def product() -> None:
    """Manage products."""


@cli.group()
def variant() -> None:
    """Manage product variants."""


@cli.group()
def lease() -> None:
    """Manage cube leases."""


# Register subcommands
product.add_command(product_add)
product.add_command(product_list)
product.add_command(product_recompute)
product.add_command(product_show)
variant.add_command(variant_add)
variant.add_command(variant_remove)
variant.add_command(variant_update)
lease.add_command(lease_add)
lease.add_command(lease_list)
lease.add_command(lease_tenant_status)
