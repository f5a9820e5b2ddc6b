"""CLI commands for products."""

from __future__ import annotations

import click

from cubepos.application.add_product import AddProductHandler
from cubepos.application.recompute_product import RecomputeProductHandler
from cubepos.application.show_product import ShowProductHandler
from cubepos.domain.exceptions import DomainException
from cubepos.domain.model.aggregate import EmptyAggregate
from cubepos.infrastructure.bootstrap import product_repository, variant_repository


@click.command("add")
@click.option("--name", required=True, help="Product name.")
@click.option("--tenant", "tenant_id", required=True, help="Owning tenant ID.")
@click.option("--category", default="", help="Product category.")
def product_add(name: str, tenant_id: str, category: str) -> None:
    """Add a new product (no variants yet)."""
    handler = AddProductHandler(product_repo=product_repository())

    try:
        product = handler.handle(name=name, tenant_id=tenant_id, category=category)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{product.id} '{product.name}' added for tenant {product.tenant_id}")


@click.command("list")
def product_list() -> None:
    """List all products with their aggregate price and stock."""
    products = product_repository().list_all()

    if not products:
        click.echo("No products found.")
        return

    click.echo(f"{'ID':<6} {'Name':<20} {'Tenant':<10} {'From':>10} {'Stock':>7}")
    click.echo("-" * 57)
    for p in products:
        click.echo(f"{p.id:<6} {p.name:<20} {p.tenant_id:<10} {str(p.price):>10} {p.stock:>7}")


@click.command("show")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_show(product_id: str) -> None:
    """Show a product and its variants."""
    handler = ShowProductHandler(
        product_repo=product_repository(),
        variant_repo=variant_repository(),
    )

    try:
        dto = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    click.echo(f"Product #{dto.id}  {dto.name}")
    click.echo(f"Tenant:   {dto.tenant_id}")
    if dto.category:
        click.echo(f"Category: {dto.category}")
    click.echo(f"Price:    from {dto.price}")
    click.echo(f"Stock:    {dto.stock}")
    click.echo()

    if not dto.has_variants:
        click.echo("  No variants.")
        return

    click.echo(f"  {'ID':<6} {'SKU':<16} {'Size':<6} {'Color':<8} {'Price':>10} {'Stock':>6}  Status")
    click.echo(f"  {'-'*65}")
    for v in dto.variants:
        click.echo(
            f"  {v.id:<6} {v.sku:<16} {v.size or '-':<6} {v.color or '-':<8} "
            f"{v.price:>10} {v.stock:>6}  {v.stock_status}"
        )


@click.command("recompute")
@click.option("--id", "product_id", required=True, help="Product ID.")
def product_recompute(product_id: str) -> None:
    """Rebuild a product's price and stock from its variants."""
    handler = RecomputeProductHandler(
        variant_repo=variant_repository(),
        product_repo=product_repository(),
    )

    try:
        aggregate = handler.handle(product_id)
    except DomainException as exc:
        raise click.ClickException(str(exc))

    if isinstance(aggregate, EmptyAggregate):
        click.echo(f"Product #{product_id} has no variants; price and stock reset to 0")
        return
    click.echo(
        f"Product #{product_id} recomputed: price {aggregate.price}, stock {aggregate.stock}"
    )
